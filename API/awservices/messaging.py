"""Messaging: messages, providers, topics and subscribers."""

from .base import ARRAY, BOOLEAN, INTEGER, OBJECT, Param, Service


service = Service(
    "messaging",
    "The messaging command allows you to manage topics and targets and send messages.",
)


list_messages = service.operation(
    "list-messages",
    "GET",
    "/messaging/messages",
    "Get a list of all messages from the current Appwrite project.",
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long. You may filter on the following attributes:"
            " scheduledAt, deliveredAt, deliveredTotal, status, description, providerType"
        ),
    ),
    Param("search", help="Search term to filter your list results. Max length: 256 chars."),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


create_email = service.operation(
    "create-email",
    "POST",
    "/messaging/messages/email",
    "Create a new email message.",
    Param(
        "messageId",
        required=True,
        help=(
            "Message ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("subject", required=True, help="Email Subject."),
    Param("content", required=True, help="Email Content."),
    Param("topics", ARRAY, help="List of Topic IDs."),
    Param("users", ARRAY, help="List of User IDs."),
    Param("targets", ARRAY, help="List of Targets IDs."),
    Param("cc", ARRAY, help="Array of target IDs to be added as CC."),
    Param("bcc", ARRAY, help="Array of target IDs to be added as BCC."),
    Param(
        "attachments",
        ARRAY,
        help=(
            "Array of compound ID strings of bucket IDs and file IDs to be attached to the email."
            " They should be formatted as <BUCKET_ID>:<FILE_ID>."
        ),
    ),
    Param("draft", BOOLEAN, help="Is message a draft"),
    Param("html", BOOLEAN, help="Is content of type HTML"),
    Param(
        "scheduledAt",
        help=(
            "Scheduled delivery time for message in [ISO"
            " 8601](https://www.iso.org/iso-8601-date-and-time-format.html) format. DateTime value"
            " must be in future."
        ),
    ),
)


update_email = service.operation(
    "update-email",
    "PATCH",
    "/messaging/messages/email/{messageId}",
    (
        "Update an email message by its unique ID. This endpoint only works on messages that are"
        " in draft status. Messages that are already processing, sent, or failed cannot be"
        " updated."
    ),
    Param("messageId", required=True, help="Message ID."),
    Param("topics", ARRAY, help="List of Topic IDs."),
    Param("users", ARRAY, help="List of User IDs."),
    Param("targets", ARRAY, help="List of Targets IDs."),
    Param("subject", help="Email Subject."),
    Param("content", help="Email Content."),
    Param("draft", BOOLEAN, help="Is message a draft"),
    Param("html", BOOLEAN, help="Is content of type HTML"),
    Param("cc", ARRAY, help="Array of target IDs to be added as CC."),
    Param("bcc", ARRAY, help="Array of target IDs to be added as BCC."),
    Param(
        "scheduledAt",
        help=(
            "Scheduled delivery time for message in [ISO"
            " 8601](https://www.iso.org/iso-8601-date-and-time-format.html) format. DateTime value"
            " must be in future."
        ),
    ),
    Param(
        "attachments",
        ARRAY,
        help=(
            "Array of compound ID strings of bucket IDs and file IDs to be attached to the email."
            " They should be formatted as <BUCKET_ID>:<FILE_ID>."
        ),
    ),
)


create_push = service.operation(
    "create-push",
    "POST",
    "/messaging/messages/push",
    "Create a new push notification.",
    Param(
        "messageId",
        required=True,
        help=(
            "Message ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("title", help="Title for push notification."),
    Param("body", help="Body for push notification."),
    Param("topics", ARRAY, help="List of Topic IDs."),
    Param("users", ARRAY, help="List of User IDs."),
    Param("targets", ARRAY, help="List of Targets IDs."),
    Param("data", OBJECT, help="Additional key-value pair data for push notification."),
    Param("action", help="Action for push notification."),
    Param(
        "image",
        help=(
            "Image for push notification. Must be a compound bucket ID to file ID of a jpeg, png,"
            " or bmp image in Appwrite Storage. It should be formatted as <BUCKET_ID>:<FILE_ID>."
        ),
    ),
    Param("icon", help="Icon for push notification. Available only for Android and Web Platform."),
    Param(
        "sound",
        help="Sound for push notification. Available only for Android and iOS Platform.",
    ),
    Param("color", help="Color for push notification. Available only for Android Platform."),
    Param("tag", help="Tag for push notification. Available only for Android Platform."),
    Param("badge", INTEGER, help="Badge for push notification. Available only for iOS Platform."),
    Param("draft", BOOLEAN, help="Is message a draft"),
    Param(
        "scheduledAt",
        help=(
            "Scheduled delivery time for message in [ISO"
            " 8601](https://www.iso.org/iso-8601-date-and-time-format.html) format. DateTime value"
            " must be in future."
        ),
    ),
    Param(
        "contentAvailable",
        BOOLEAN,
        help=(
            "If set to true, the notification will be delivered in the background. Available only"
            " for iOS Platform."
        ),
    ),
    Param(
        "critical",
        BOOLEAN,
        help=(
            "If set to true, the notification will be marked as critical. This requires the app"
            " to have the critical notification entitlement. Available only for iOS Platform."
        ),
    ),
    Param(
        "priority",
        help=(
            "Set the notification priority. \"normal\" will consider device state and may not"
            " deliver notifications immediately. \"high\" will always attempt to immediately deliver"
            " the notification."
        ),
    ),
)


update_push = service.operation(
    "update-push",
    "PATCH",
    "/messaging/messages/push/{messageId}",
    (
        "Update a push notification by its unique ID. This endpoint only works on messages that"
        " are in draft status. Messages that are already processing, sent, or failed cannot be"
        " updated."
    ),
    Param("messageId", required=True, help="Message ID."),
    Param("topics", ARRAY, help="List of Topic IDs."),
    Param("users", ARRAY, help="List of User IDs."),
    Param("targets", ARRAY, help="List of Targets IDs."),
    Param("title", help="Title for push notification."),
    Param("body", help="Body for push notification."),
    Param("data", OBJECT, help="Additional Data for push notification."),
    Param("action", help="Action for push notification."),
    Param(
        "image",
        help=(
            "Image for push notification. Must be a compound bucket ID to file ID of a jpeg, png,"
            " or bmp image in Appwrite Storage. It should be formatted as <BUCKET_ID>:<FILE_ID>."
        ),
    ),
    Param(
        "icon",
        help="Icon for push notification. Available only for Android and Web platforms.",
    ),
    Param(
        "sound",
        help="Sound for push notification. Available only for Android and iOS platforms.",
    ),
    Param("color", help="Color for push notification. Available only for Android platforms."),
    Param("tag", help="Tag for push notification. Available only for Android platforms."),
    Param("badge", INTEGER, help="Badge for push notification. Available only for iOS platforms."),
    Param("draft", BOOLEAN, help="Is message a draft"),
    Param(
        "scheduledAt",
        help=(
            "Scheduled delivery time for message in [ISO"
            " 8601](https://www.iso.org/iso-8601-date-and-time-format.html) format. DateTime value"
            " must be in future."
        ),
    ),
    Param(
        "contentAvailable",
        BOOLEAN,
        help=(
            "If set to true, the notification will be delivered in the background. Available only"
            " for iOS Platform."
        ),
    ),
    Param(
        "critical",
        BOOLEAN,
        help=(
            "If set to true, the notification will be marked as critical. This requires the app"
            " to have the critical notification entitlement. Available only for iOS Platform."
        ),
    ),
    Param(
        "priority",
        help=(
            "Set the notification priority. \"normal\" will consider device battery state and may"
            " send notifications later. \"high\" will always attempt to immediately deliver the"
            " notification."
        ),
    ),
)


create_sms = service.operation(
    "create-sms",
    "POST",
    "/messaging/messages/sms",
    "Create a new SMS message.",
    Param(
        "messageId",
        required=True,
        help=(
            "Message ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("content", required=True, help="SMS Content."),
    Param("topics", ARRAY, help="List of Topic IDs."),
    Param("users", ARRAY, help="List of User IDs."),
    Param("targets", ARRAY, help="List of Targets IDs."),
    Param("draft", BOOLEAN, help="Is message a draft"),
    Param(
        "scheduledAt",
        help=(
            "Scheduled delivery time for message in [ISO"
            " 8601](https://www.iso.org/iso-8601-date-and-time-format.html) format. DateTime value"
            " must be in future."
        ),
    ),
)


update_sms = service.operation(
    "update-sms",
    "PATCH",
    "/messaging/messages/sms/{messageId}",
    (
        "Update an SMS message by its unique ID. This endpoint only works on messages that are in"
        " draft status. Messages that are already processing, sent, or failed cannot be updated."
    ),
    Param("messageId", required=True, help="Message ID."),
    Param("topics", ARRAY, help="List of Topic IDs."),
    Param("users", ARRAY, help="List of User IDs."),
    Param("targets", ARRAY, help="List of Targets IDs."),
    Param("content", help="Email Content."),
    Param("draft", BOOLEAN, help="Is message a draft"),
    Param(
        "scheduledAt",
        help=(
            "Scheduled delivery time for message in [ISO"
            " 8601](https://www.iso.org/iso-8601-date-and-time-format.html) format. DateTime value"
            " must be in future."
        ),
    ),
)


get_message = service.operation(
    "get-message",
    "GET",
    "/messaging/messages/{messageId}",
    "Get a message by its unique ID.",
    Param("messageId", required=True, help="Message ID."),
)


delete_message = service.operation(
    "delete",
    "DELETE",
    "/messaging/messages/{messageId}",
    (
        "Delete a message. If the message is not a draft or scheduled, but has been sent, this"
        " will not recall the message."
    ),
    Param("messageId", required=True, help="Message ID."),
)


list_message_logs = service.operation(
    "list-message-logs",
    "GET",
    "/messaging/messages/{messageId}/logs",
    "Get the message activity logs listed by its unique ID.",
    Param("messageId", required=True, help="Message ID."),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Only supported methods are"
            " limit and offset"
        ),
    ),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


list_targets = service.operation(
    "list-targets",
    "GET",
    "/messaging/messages/{messageId}/targets",
    "Get a list of the targets associated with a message.",
    Param("messageId", required=True, help="Message ID."),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long. You may filter on the following attributes:"
            " userId, providerId, identifier, providerType"
        ),
    ),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


list_providers = service.operation(
    "list-providers",
    "GET",
    "/messaging/providers",
    "Get a list of all providers from the current Appwrite project.",
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long. You may filter on the following attributes:"
            " name, provider, type, enabled"
        ),
    ),
    Param("search", help="Search term to filter your list results. Max length: 256 chars."),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


create_apns_provider = service.operation(
    "create-apns-provider",
    "POST",
    "/messaging/providers/apns",
    "Create a new Apple Push Notification service provider.",
    Param(
        "providerId",
        required=True,
        help=(
            "Provider ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("name", required=True, help="Provider name."),
    Param("authKey", help="APNS authentication key."),
    Param("authKeyId", help="APNS authentication key ID."),
    Param("teamId", help="APNS team ID."),
    Param("bundleId", help="APNS bundle ID."),
    Param("sandbox", BOOLEAN, help="Use APNS sandbox environment."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
)


update_apns_provider = service.operation(
    "update-apns-provider",
    "PATCH",
    "/messaging/providers/apns/{providerId}",
    "Update a Apple Push Notification service provider by its unique ID.",
    Param("providerId", required=True, help="Provider ID."),
    Param("name", help="Provider name."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
    Param("authKey", help="APNS authentication key."),
    Param("authKeyId", help="APNS authentication key ID."),
    Param("teamId", help="APNS team ID."),
    Param("bundleId", help="APNS bundle ID."),
    Param("sandbox", BOOLEAN, help="Use APNS sandbox environment."),
)


create_fcm_provider = service.operation(
    "create-fcm-provider",
    "POST",
    "/messaging/providers/fcm",
    "Create a new Firebase Cloud Messaging provider.",
    Param(
        "providerId",
        required=True,
        help=(
            "Provider ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("name", required=True, help="Provider name."),
    Param("serviceAccountJSON", OBJECT, help="FCM service account JSON."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
)


update_fcm_provider = service.operation(
    "update-fcm-provider",
    "PATCH",
    "/messaging/providers/fcm/{providerId}",
    "Update a Firebase Cloud Messaging provider by its unique ID.",
    Param("providerId", required=True, help="Provider ID."),
    Param("name", help="Provider name."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
    Param("serviceAccountJSON", OBJECT, help="FCM service account JSON."),
)


create_mailgun_provider = service.operation(
    "create-mailgun-provider",
    "POST",
    "/messaging/providers/mailgun",
    "Create a new Mailgun provider.",
    Param(
        "providerId",
        required=True,
        help=(
            "Provider ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("name", required=True, help="Provider name."),
    Param("apiKey", help="Mailgun API Key."),
    Param("domain", help="Mailgun Domain."),
    Param("isEuRegion", BOOLEAN, help="Set as EU region."),
    Param("fromName", help="Sender Name."),
    Param("fromEmail", help="Sender email address."),
    Param(
        "replyToName",
        help=(
            "Name set in the reply to field for the mail. Default value is sender name. Reply to"
            " name must have reply to email as well."
        ),
    ),
    Param(
        "replyToEmail",
        help=(
            "Email set in the reply to field for the mail. Default value is sender email. Reply"
            " to email must have reply to name as well."
        ),
    ),
    Param("enabled", BOOLEAN, help="Set as enabled."),
)


update_mailgun_provider = service.operation(
    "update-mailgun-provider",
    "PATCH",
    "/messaging/providers/mailgun/{providerId}",
    "Update a Mailgun provider by its unique ID.",
    Param("providerId", required=True, help="Provider ID."),
    Param("name", help="Provider name."),
    Param("apiKey", help="Mailgun API Key."),
    Param("domain", help="Mailgun Domain."),
    Param("isEuRegion", BOOLEAN, help="Set as EU region."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
    Param("fromName", help="Sender Name."),
    Param("fromEmail", help="Sender email address."),
    Param(
        "replyToName",
        help="Name set in the reply to field for the mail. Default value is sender name.",
    ),
    Param(
        "replyToEmail",
        help="Email set in the reply to field for the mail. Default value is sender email.",
    ),
)


create_msg91_provider = service.operation(
    "create-msg-91-provider",
    "POST",
    "/messaging/providers/msg91",
    "Create a new MSG91 provider.",
    Param(
        "providerId",
        required=True,
        help=(
            "Provider ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("name", required=True, help="Provider name."),
    Param("templateId", help="Msg91 template ID"),
    Param("senderId", help="Msg91 sender ID."),
    Param("authKey", help="Msg91 auth key."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
)


update_msg91_provider = service.operation(
    "update-msg-91-provider",
    "PATCH",
    "/messaging/providers/msg91/{providerId}",
    "Update a MSG91 provider by its unique ID.",
    Param("providerId", required=True, help="Provider ID."),
    Param("name", help="Provider name."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
    Param("templateId", help="Msg91 template ID."),
    Param("senderId", help="Msg91 sender ID."),
    Param("authKey", help="Msg91 auth key."),
)


create_resend_provider = service.operation(
    "create-resend-provider",
    "POST",
    "/messaging/providers/resend",
    "Create a new Resend provider.",
    Param(
        "providerId",
        required=True,
        help=(
            "Provider ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("name", required=True, help="Provider name."),
    Param("apiKey", help="Resend API key."),
    Param("fromName", help="Sender Name."),
    Param("fromEmail", help="Sender email address."),
    Param(
        "replyToName",
        help="Name set in the reply to field for the mail. Default value is sender name.",
    ),
    Param(
        "replyToEmail",
        help="Email set in the reply to field for the mail. Default value is sender email.",
    ),
    Param("enabled", BOOLEAN, help="Set as enabled."),
)


update_resend_provider = service.operation(
    "update-resend-provider",
    "PATCH",
    "/messaging/providers/resend/{providerId}",
    "Update a Resend provider by its unique ID.",
    Param("providerId", required=True, help="Provider ID."),
    Param("name", help="Provider name."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
    Param("apiKey", help="Resend API key."),
    Param("fromName", help="Sender Name."),
    Param("fromEmail", help="Sender email address."),
    Param(
        "replyToName",
        help="Name set in the Reply To field for the mail. Default value is Sender Name.",
    ),
    Param(
        "replyToEmail",
        help="Email set in the Reply To field for the mail. Default value is Sender Email.",
    ),
)


create_sendgrid_provider = service.operation(
    "create-sendgrid-provider",
    "POST",
    "/messaging/providers/sendgrid",
    "Create a new Sendgrid provider.",
    Param(
        "providerId",
        required=True,
        help=(
            "Provider ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("name", required=True, help="Provider name."),
    Param("apiKey", help="Sendgrid API key."),
    Param("fromName", help="Sender Name."),
    Param("fromEmail", help="Sender email address."),
    Param(
        "replyToName",
        help="Name set in the reply to field for the mail. Default value is sender name.",
    ),
    Param(
        "replyToEmail",
        help="Email set in the reply to field for the mail. Default value is sender email.",
    ),
    Param("enabled", BOOLEAN, help="Set as enabled."),
)


update_sendgrid_provider = service.operation(
    "update-sendgrid-provider",
    "PATCH",
    "/messaging/providers/sendgrid/{providerId}",
    "Update a Sendgrid provider by its unique ID.",
    Param("providerId", required=True, help="Provider ID."),
    Param("name", help="Provider name."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
    Param("apiKey", help="Sendgrid API key."),
    Param("fromName", help="Sender Name."),
    Param("fromEmail", help="Sender email address."),
    Param(
        "replyToName",
        help="Name set in the Reply To field for the mail. Default value is Sender Name.",
    ),
    Param(
        "replyToEmail",
        help="Email set in the Reply To field for the mail. Default value is Sender Email.",
    ),
)


create_smtp_provider = service.operation(
    "create-smtp-provider",
    "POST",
    "/messaging/providers/smtp",
    "Create a new SMTP provider.",
    Param(
        "providerId",
        required=True,
        help=(
            "Provider ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("name", required=True, help="Provider name."),
    Param(
        "host",
        required=True,
        help=(
            "SMTP hosts. Either a single hostname or multiple semicolon-delimited hostnames. You"
            " can also specify a different port for each host such as"
            " 'smtp1.example.com:25;smtp2.example.com'. You can also specify encryption type, for"
            " example: 'tls://smtp1.example.com:587;ssl://smtp2.example.com:465\"'. Hosts will be"
            " tried in order."
        ),
    ),
    Param("port", INTEGER, help="The default SMTP server port."),
    Param("username", help="Authentication username."),
    Param("password", help="Authentication password."),
    Param("encryption", help="Encryption type. Can be omitted, 'ssl', or 'tls'"),
    Param("autoTLS", BOOLEAN, help="Enable SMTP AutoTLS feature."),
    Param("mailer", help="The value to use for the X-Mailer header."),
    Param("fromName", help="Sender Name."),
    Param("fromEmail", help="Sender email address."),
    Param(
        "replyToName",
        help="Name set in the reply to field for the mail. Default value is sender name.",
    ),
    Param(
        "replyToEmail",
        help="Email set in the reply to field for the mail. Default value is sender email.",
    ),
    Param("enabled", BOOLEAN, help="Set as enabled."),
)


update_smtp_provider = service.operation(
    "update-smtp-provider",
    "PATCH",
    "/messaging/providers/smtp/{providerId}",
    "Update a SMTP provider by its unique ID.",
    Param("providerId", required=True, help="Provider ID."),
    Param("name", help="Provider name."),
    Param(
        "host",
        help=(
            "SMTP hosts. Either a single hostname or multiple semicolon-delimited hostnames. You"
            " can also specify a different port for each host such as"
            " 'smtp1.example.com:25;smtp2.example.com'. You can also specify encryption type, for"
            " example: 'tls://smtp1.example.com:587;ssl://smtp2.example.com:465\"'. Hosts will be"
            " tried in order."
        ),
    ),
    Param("port", INTEGER, help="SMTP port."),
    Param("username", help="Authentication username."),
    Param("password", help="Authentication password."),
    Param("encryption", help="Encryption type. Can be 'ssl' or 'tls'"),
    Param("autoTLS", BOOLEAN, help="Enable SMTP AutoTLS feature."),
    Param("mailer", help="The value to use for the X-Mailer header."),
    Param("fromName", help="Sender Name."),
    Param("fromEmail", help="Sender email address."),
    Param(
        "replyToName",
        help="Name set in the Reply To field for the mail. Default value is Sender Name.",
    ),
    Param(
        "replyToEmail",
        help="Email set in the Reply To field for the mail. Default value is Sender Email.",
    ),
    Param("enabled", BOOLEAN, help="Set as enabled."),
)


create_telesign_provider = service.operation(
    "create-telesign-provider",
    "POST",
    "/messaging/providers/telesign",
    "Create a new Telesign provider.",
    Param(
        "providerId",
        required=True,
        help=(
            "Provider ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("name", required=True, help="Provider name."),
    Param(
        "from",
        help=(
            "Sender Phone number. Format this number with a leading '+' and a country code, e.g.,"
            " +16175551212."
        ),
    ),
    Param("customerId", help="Telesign customer ID."),
    Param("apiKey", help="Telesign API key."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
)


update_telesign_provider = service.operation(
    "update-telesign-provider",
    "PATCH",
    "/messaging/providers/telesign/{providerId}",
    "Update a Telesign provider by its unique ID.",
    Param("providerId", required=True, help="Provider ID."),
    Param("name", help="Provider name."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
    Param("customerId", help="Telesign customer ID."),
    Param("apiKey", help="Telesign API key."),
    Param("from", help="Sender number."),
)


create_textmagic_provider = service.operation(
    "create-textmagic-provider",
    "POST",
    "/messaging/providers/textmagic",
    "Create a new Textmagic provider.",
    Param(
        "providerId",
        required=True,
        help=(
            "Provider ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("name", required=True, help="Provider name."),
    Param(
        "from",
        help=(
            "Sender Phone number. Format this number with a leading '+' and a country code, e.g.,"
            " +16175551212."
        ),
    ),
    Param("username", help="Textmagic username."),
    Param("apiKey", help="Textmagic apiKey."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
)


update_textmagic_provider = service.operation(
    "update-textmagic-provider",
    "PATCH",
    "/messaging/providers/textmagic/{providerId}",
    "Update a Textmagic provider by its unique ID.",
    Param("providerId", required=True, help="Provider ID."),
    Param("name", help="Provider name."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
    Param("username", help="Textmagic username."),
    Param("apiKey", help="Textmagic apiKey."),
    Param("from", help="Sender number."),
)


create_twilio_provider = service.operation(
    "create-twilio-provider",
    "POST",
    "/messaging/providers/twilio",
    "Create a new Twilio provider.",
    Param(
        "providerId",
        required=True,
        help=(
            "Provider ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("name", required=True, help="Provider name."),
    Param(
        "from",
        help=(
            "Sender Phone number. Format this number with a leading '+' and a country code, e.g.,"
            " +16175551212."
        ),
    ),
    Param("accountSid", help="Twilio account secret ID."),
    Param("authToken", help="Twilio authentication token."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
)


update_twilio_provider = service.operation(
    "update-twilio-provider",
    "PATCH",
    "/messaging/providers/twilio/{providerId}",
    "Update a Twilio provider by its unique ID.",
    Param("providerId", required=True, help="Provider ID."),
    Param("name", help="Provider name."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
    Param("accountSid", help="Twilio account secret ID."),
    Param("authToken", help="Twilio authentication token."),
    Param("from", help="Sender number."),
)


create_vonage_provider = service.operation(
    "create-vonage-provider",
    "POST",
    "/messaging/providers/vonage",
    "Create a new Vonage provider.",
    Param(
        "providerId",
        required=True,
        help=(
            "Provider ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("name", required=True, help="Provider name."),
    Param(
        "from",
        help=(
            "Sender Phone number. Format this number with a leading '+' and a country code, e.g.,"
            " +16175551212."
        ),
    ),
    Param("apiKey", help="Vonage API key."),
    Param("apiSecret", help="Vonage API secret."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
)


update_vonage_provider = service.operation(
    "update-vonage-provider",
    "PATCH",
    "/messaging/providers/vonage/{providerId}",
    "Update a Vonage provider by its unique ID.",
    Param("providerId", required=True, help="Provider ID."),
    Param("name", help="Provider name."),
    Param("enabled", BOOLEAN, help="Set as enabled."),
    Param("apiKey", help="Vonage API key."),
    Param("apiSecret", help="Vonage API secret."),
    Param("from", help="Sender number."),
)


get_provider = service.operation(
    "get-provider",
    "GET",
    "/messaging/providers/{providerId}",
    "Get a provider by its unique ID.",
    Param("providerId", required=True, help="Provider ID."),
)


delete_provider = service.operation(
    "delete-provider",
    "DELETE",
    "/messaging/providers/{providerId}",
    "Delete a provider by its unique ID.",
    Param("providerId", required=True, help="Provider ID."),
)


list_provider_logs = service.operation(
    "list-provider-logs",
    "GET",
    "/messaging/providers/{providerId}/logs",
    "Get the provider activity logs listed by its unique ID.",
    Param("providerId", required=True, help="Provider ID."),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Only supported methods are"
            " limit and offset"
        ),
    ),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


list_subscriber_logs = service.operation(
    "list-subscriber-logs",
    "GET",
    "/messaging/subscribers/{subscriberId}/logs",
    "Get the subscriber activity logs listed by its unique ID.",
    Param("subscriberId", required=True, help="Subscriber ID."),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Only supported methods are"
            " limit and offset"
        ),
    ),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


list_topics = service.operation(
    "list-topics",
    "GET",
    "/messaging/topics",
    "Get a list of all topics from the current Appwrite project.",
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long. You may filter on the following attributes:"
            " name, description, emailTotal, smsTotal, pushTotal"
        ),
    ),
    Param("search", help="Search term to filter your list results. Max length: 256 chars."),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


create_topic = service.operation(
    "create-topic",
    "POST",
    "/messaging/topics",
    "Create a new topic.",
    Param("topicId", required=True, help="Topic ID. Choose a custom Topic ID or a new Topic ID."),
    Param("name", required=True, help="Topic Name."),
    Param(
        "subscribe",
        ARRAY,
        help=(
            "An array of role strings with subscribe permission. By default all users are granted"
            " with any subscribe permission. [learn more about"
            " roles](https://appwrite.io/docs/permissions#permission-roles). Maximum of 100 roles"
            " are allowed, each 64 characters long."
        ),
    ),
)


get_topic = service.operation(
    "get-topic",
    "GET",
    "/messaging/topics/{topicId}",
    "Get a topic by its unique ID.",
    Param("topicId", required=True, help="Topic ID."),
)


update_topic = service.operation(
    "update-topic",
    "PATCH",
    "/messaging/topics/{topicId}",
    "Update a topic by its unique ID.",
    Param("topicId", required=True, help="Topic ID."),
    Param("name", help="Topic Name."),
    Param(
        "subscribe",
        ARRAY,
        help=(
            "An array of role strings with subscribe permission. By default all users are granted"
            " with any subscribe permission. [learn more about"
            " roles](https://appwrite.io/docs/permissions#permission-roles). Maximum of 100 roles"
            " are allowed, each 64 characters long."
        ),
    ),
)


delete_topic = service.operation(
    "delete-topic",
    "DELETE",
    "/messaging/topics/{topicId}",
    "Delete a topic by its unique ID.",
    Param("topicId", required=True, help="Topic ID."),
)


list_topic_logs = service.operation(
    "list-topic-logs",
    "GET",
    "/messaging/topics/{topicId}/logs",
    "Get the topic activity logs listed by its unique ID.",
    Param("topicId", required=True, help="Topic ID."),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Only supported methods are"
            " limit and offset"
        ),
    ),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


list_subscribers = service.operation(
    "list-subscribers",
    "GET",
    "/messaging/topics/{topicId}/subscribers",
    "Get a list of all subscribers from the current Appwrite project.",
    Param("topicId", required=True, help="Topic ID. The topic ID subscribed to."),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long. You may filter on the following attributes:"
            " name, provider, type, enabled"
        ),
    ),
    Param("search", help="Search term to filter your list results. Max length: 256 chars."),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


create_subscriber = service.operation(
    "create-subscriber",
    "POST",
    "/messaging/topics/{topicId}/subscribers",
    "Create a new subscriber.",
    Param("topicId", required=True, help="Topic ID. The topic ID to subscribe to."),
    Param(
        "subscriberId",
        required=True,
        help="Subscriber ID. Choose a custom Subscriber ID or a new Subscriber ID.",
    ),
    Param(
        "targetId",
        required=True,
        help="Target ID. The target ID to link to the specified Topic ID.",
    ),
)


get_subscriber = service.operation(
    "get-subscriber",
    "GET",
    "/messaging/topics/{topicId}/subscribers/{subscriberId}",
    "Get a subscriber by its unique ID.",
    Param("topicId", required=True, help="Topic ID. The topic ID subscribed to."),
    Param("subscriberId", required=True, help="Subscriber ID."),
)


delete_subscriber = service.operation(
    "delete-subscriber",
    "DELETE",
    "/messaging/topics/{topicId}/subscribers/{subscriberId}",
    "Delete a subscriber by its unique ID.",
    Param("topicId", required=True, help="Topic ID. The topic ID subscribed to."),
    Param("subscriberId", required=True, help="Subscriber ID."),
)
