"""Tables under a legacy database (`/databases/{databaseId}/tables`)."""

from .base import ARRAY, BOOLEAN, FLOAT, INTEGER, INTEGER_ARRAY, OBJECT, OBJECT_ARRAY, Param, Service


service = Service(
    "tables",
    (
        "The tables command allows you to create structured tables of columns and query and"
        " filter lists of rows."
    ),
)


list_tables = service.operation(
    "list",
    "GET",
    "/databases/{databaseId}/tables",
    (
        "Get a list of all tables that belong to the provided databaseId. You can use the search"
        " parameter to filter your results."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long. You may filter on the following attributes:"
            " name, enabled, rowSecurity"
        ),
    ),
    Param("search", help="Search term to filter your list results. Max length: 256 chars."),
)


create_table = service.operation(
    "create",
    "POST",
    "/databases/{databaseId}/tables",
    (
        "Create a new Table. Before using this route, you should create a new database resource"
        " using either a [server"
        " integration](https://appwrite.io/docs/server/databases#databasesCreateTable) API or"
        " directly from your database console."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Unique Id. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("name", required=True, help="Table name. Max length: 128 chars."),
    Param(
        "permissions",
        ARRAY,
        help=(
            "An array of permissions strings. By default, no user is granted with any"
            " permissions. [Learn more about permissions](https://appwrite.io/docs/permissions)."
        ),
    ),
    Param(
        "rowSecurity",
        BOOLEAN,
        help=(
            "Enables configuring permissions for individual rows. A user needs one of row or"
            " table level permissions to access a row. [Learn more about"
            " permissions](https://appwrite.io/docs/permissions)."
        ),
    ),
    Param(
        "enabled",
        BOOLEAN,
        help=(
            "Is table enabled? When set to 'disabled', users cannot access the table but Server"
            " SDKs with and API key can still read and write to the table. No data is lost when"
            " this is toggled."
        ),
    ),
)


get_table = service.operation(
    "get",
    "GET",
    "/databases/{databaseId}/tables/{tableId}",
    (
        "Get a table by its unique ID. This endpoint response returns a JSON object with the"
        " table metadata."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
)


update_table = service.operation(
    "update",
    "PUT",
    "/databases/{databaseId}/tables/{tableId}",
    "Update a table by its unique ID.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("name", required=True, help="Table name. Max length: 128 chars."),
    Param(
        "permissions",
        ARRAY,
        help=(
            "An array of permission strings. By default, the current permissions are inherited."
            " [Learn more about permissions](https://appwrite.io/docs/permissions)."
        ),
    ),
    Param(
        "rowSecurity",
        BOOLEAN,
        help=(
            "Enables configuring permissions for individual rows. A user needs one of row or"
            " table level permissions to access a document. [Learn more about"
            " permissions](https://appwrite.io/docs/permissions)."
        ),
    ),
    Param(
        "enabled",
        BOOLEAN,
        help=(
            "Is table enabled? When set to 'disabled', users cannot access the table but Server"
            " SDKs with and API key can still read and write to the table. No data is lost when"
            " this is toggled."
        ),
    ),
)


delete_table = service.operation(
    "delete",
    "DELETE",
    "/databases/{databaseId}/tables/{tableId}",
    (
        "Delete a table by its unique ID. Only users with write permissions have access to delete"
        " this resource."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
)


list_columns = service.operation(
    "list-columns",
    "GET",
    "/databases/{databaseId}/tables/{tableId}/columns",
    "List attributes in the collection.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long. You may filter on the following attributes: key,"
            " type, size, required, array, status, error"
        ),
    ),
)


create_boolean_column = service.operation(
    "create-boolean-column",
    "POST",
    "/databases/{databaseId}/tables/{tableId}/columns/boolean",
    "Create a boolean column.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/server/tables#tablesCreate)."
        ),
    ),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        BOOLEAN,
        help="Default value for column when not provided. Cannot be set when column is required.",
    ),
    Param("array", BOOLEAN, help="Is column an array?"),
)


update_boolean_column = service.operation(
    "update-boolean-column",
    "PATCH",
    "/databases/{databaseId}/tables/{tableId}/columns/boolean/{key}",
    "Update a boolean column. Changing the 'default' value will not update already existing rows.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/server/tables#tablesCreate)."
        ),
    ),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        BOOLEAN,
        help="Default value for column when not provided. Cannot be set when column is required.",
    ),
    Param("newKey", help="New Column Key."),
)


create_datetime_column = service.operation(
    "create-datetime-column",
    "POST",
    "/databases/{databaseId}/tables/{tableId}/columns/datetime",
    "Create a date time column according to the ISO 8601 standard.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        help=(
            "Default value for the column in [ISO"
            " 8601](https://www.iso.org/iso-8601-date-and-time-format.html) format. Cannot be set"
            " when column is required."
        ),
    ),
    Param("array", BOOLEAN, help="Is column an array?"),
)


update_datetime_column = service.operation(
    "update-datetime-column",
    "PATCH",
    "/databases/{databaseId}/tables/{tableId}/columns/datetime/{key}",
    (
        "Update a date time column. Changing the 'default' value will not update already existing"
        " rows."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        help="Default value for column when not provided. Cannot be set when column is required.",
    ),
    Param("newKey", help="New Column Key."),
)


create_email_column = service.operation(
    "create-email-column",
    "POST",
    "/databases/{databaseId}/tables/{tableId}/columns/email",
    "Create an email column.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        help="Default value for column when not provided. Cannot be set when column is required.",
    ),
    Param("array", BOOLEAN, help="Is column an array?"),
)


update_email_column = service.operation(
    "update-email-column",
    "PATCH",
    "/databases/{databaseId}/tables/{tableId}/columns/email/{key}",
    "Update an email column. Changing the 'default' value will not update already existing rows.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        help="Default value for column when not provided. Cannot be set when column is required.",
    ),
    Param("newKey", help="New Column Key."),
)


create_enum_column = service.operation(
    "create-enum-column",
    "POST",
    "/databases/{databaseId}/tables/{tableId}/columns/enum",
    (
        "Create an enumeration column. The 'elements' param acts as a white-list of accepted"
        " values for this column."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("elements", ARRAY, required=True, help="Array of enum values."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        help="Default value for column when not provided. Cannot be set when column is required.",
    ),
    Param("array", BOOLEAN, help="Is column an array?"),
)


update_enum_column = service.operation(
    "update-enum-column",
    "PATCH",
    "/databases/{databaseId}/tables/{tableId}/columns/enum/{key}",
    "Update an enum column. Changing the 'default' value will not update already existing rows.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("elements", ARRAY, required=True, help="Updated list of enum values."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        help="Default value for column when not provided. Cannot be set when column is required.",
    ),
    Param("newKey", help="New Column Key."),
)


create_float_column = service.operation(
    "create-float-column",
    "POST",
    "/databases/{databaseId}/tables/{tableId}/columns/float",
    "Create a float column. Optionally, minimum and maximum values can be provided.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param("min", FLOAT, help="Minimum value"),
    Param("max", FLOAT, help="Maximum value"),
    Param("default", FLOAT, help="Default value. Cannot be set when required."),
    Param("array", BOOLEAN, help="Is column an array?"),
)


update_float_column = service.operation(
    "update-float-column",
    "PATCH",
    "/databases/{databaseId}/tables/{tableId}/columns/float/{key}",
    "Update a float column. Changing the 'default' value will not update already existing rows.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param("default", FLOAT, help="Default value. Cannot be set when required."),
    Param("min", FLOAT, help="Minimum value"),
    Param("max", FLOAT, help="Maximum value"),
    Param("newKey", help="New Column Key."),
)


create_integer_column = service.operation(
    "create-integer-column",
    "POST",
    "/databases/{databaseId}/tables/{tableId}/columns/integer",
    "Create an integer column. Optionally, minimum and maximum values can be provided.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param("min", INTEGER, help="Minimum value"),
    Param("max", INTEGER, help="Maximum value"),
    Param("default", INTEGER, help="Default value. Cannot be set when column is required."),
    Param("array", BOOLEAN, help="Is column an array?"),
)


update_integer_column = service.operation(
    "update-integer-column",
    "PATCH",
    "/databases/{databaseId}/tables/{tableId}/columns/integer/{key}",
    (
        "Update an integer column. Changing the 'default' value will not update already existing"
        " rows."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param("default", INTEGER, help="Default value. Cannot be set when column is required."),
    Param("min", INTEGER, help="Minimum value"),
    Param("max", INTEGER, help="Maximum value"),
    Param("newKey", help="New Column Key."),
)


create_ip_column = service.operation(
    "create-ip-column",
    "POST",
    "/databases/{databaseId}/tables/{tableId}/columns/ip",
    "Create IP address column.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param("default", help="Default value. Cannot be set when column is required."),
    Param("array", BOOLEAN, help="Is column an array?"),
)


update_ip_column = service.operation(
    "update-ip-column",
    "PATCH",
    "/databases/{databaseId}/tables/{tableId}/columns/ip/{key}",
    "Update an ip column. Changing the 'default' value will not update already existing rows.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param("default", help="Default value. Cannot be set when column is required."),
    Param("newKey", help="New Column Key."),
)


create_relationship_column = service.operation(
    "create-relationship-column",
    "POST",
    "/databases/{databaseId}/tables/{tableId}/columns/relationship",
    (
        "Create relationship column. [Learn more about relationship"
        " columns](https://appwrite.io/docs/databases-relationships#relationship-columns)."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("relatedTableId", required=True, help="Related Table ID."),
    Param("type", required=True, help="Relation type"),
    Param("twoWay", BOOLEAN, help="Is Two Way?"),
    Param("key", help="Column Key."),
    Param("twoWayKey", help="Two Way Column Key."),
    Param("onDelete", help="Constraints option"),
)


create_string_column = service.operation(
    "create-string-column",
    "POST",
    "/databases/{databaseId}/tables/{tableId}/columns/string",
    "Create a string column.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/server/tables#tablesCreate)."
        ),
    ),
    Param("key", required=True, help="Column Key."),
    Param(
        "size",
        INTEGER,
        required=True,
        help="Attribute size for text attributes, in number of characters.",
    ),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        help="Default value for column when not provided. Cannot be set when column is required.",
    ),
    Param("array", BOOLEAN, help="Is column an array?"),
    Param(
        "encrypt",
        BOOLEAN,
        help=(
            "Toggle encryption for the column. Encryption enhances security by not storing any"
            " plain text values in the database. However, encrypted columns cannot be queried."
        ),
    ),
)


update_string_column = service.operation(
    "update-string-column",
    "PATCH",
    "/databases/{databaseId}/tables/{tableId}/columns/string/{key}",
    "Update a string column. Changing the 'default' value will not update already existing rows.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/server/tables#tablesCreate)."
        ),
    ),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        help="Default value for column when not provided. Cannot be set when column is required.",
    ),
    Param("size", INTEGER, help="Maximum size of the string column."),
    Param("newKey", help="New Column Key."),
)


create_url_column = service.operation(
    "create-url-column",
    "POST",
    "/databases/{databaseId}/tables/{tableId}/columns/url",
    "Create a URL column.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        help="Default value for column when not provided. Cannot be set when column is required.",
    ),
    Param("array", BOOLEAN, help="Is column an array?"),
)


update_url_column = service.operation(
    "update-url-column",
    "PATCH",
    "/databases/{databaseId}/tables/{tableId}/columns/url/{key}",
    "Update an url column. Changing the 'default' value will not update already existing rows.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        help="Default value for column when not provided. Cannot be set when column is required.",
    ),
    Param("newKey", help="New Column Key."),
)


get_column = service.operation(
    "get-column",
    "GET",
    "/databases/{databaseId}/tables/{tableId}/columns/{key}",
    "Get column by ID.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
)


delete_column = service.operation(
    "delete-column",
    "DELETE",
    "/databases/{databaseId}/tables/{tableId}/columns/{key}",
    "Deletes a column.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
)


update_relationship_column = service.operation(
    "update-relationship-column",
    "PATCH",
    "/databases/{databaseId}/tables/{tableId}/columns/{key}/relationship",
    (
        "Update relationship column. [Learn more about relationship"
        " columns](https://appwrite.io/docs/databases-relationships#relationship-columns)."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("onDelete", help="Constraints option"),
    Param("newKey", help="New Column Key."),
)


list_indexes = service.operation(
    "list-indexes",
    "GET",
    "/databases/{databaseId}/tables/{tableId}/indexes",
    "List indexes in the collection.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/server/tables#tablesCreate)."
        ),
    ),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long. You may filter on the following attributes: key,"
            " type, status, attributes, error"
        ),
    ),
)


create_index = service.operation(
    "create-index",
    "POST",
    "/databases/{databaseId}/tables/{tableId}/indexes",
    (
        "Creates an index on the attributes listed. Your index should include all the attributes"
        " you will query in a single request. Attributes can be 'key', 'fulltext', and 'unique'."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/server/tables#tablesCreate)."
        ),
    ),
    Param("key", required=True, help="Index Key."),
    Param("type", required=True, help="Index type."),
    Param(
        "columns",
        ARRAY,
        required=True,
        help=(
            "Array of columns to index. Maximum of 100 columns are allowed, each 32 characters"
            " long."
        ),
    ),
    Param("orders", ARRAY, help="Array of index orders. Maximum of 100 orders are allowed."),
    Param("lengths", INTEGER_ARRAY, help="Length of index. Maximum of 100"),
)


get_index = service.operation(
    "get-index",
    "GET",
    "/databases/{databaseId}/tables/{tableId}/indexes/{key}",
    "Get index by ID.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/server/tables#tablesCreate)."
        ),
    ),
    Param("key", required=True, help="Index Key."),
)


delete_index = service.operation(
    "delete-index",
    "DELETE",
    "/databases/{databaseId}/tables/{tableId}/indexes/{key}",
    "Delete an index.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/server/tables#tablesCreate)."
        ),
    ),
    Param("key", required=True, help="Index Key."),
)


list_logs = service.operation(
    "list-logs",
    "GET",
    "/databases/{databaseId}/tables/{tableId}/logs",
    "Get the table activity logs list by its unique ID.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Only supported methods are"
            " limit and offset"
        ),
    ),
)


list_rows = service.operation(
    "list-rows",
    "GET",
    "/databases/{databaseId}/tables/{tableId}/rows",
    (
        "Get a list of all the user's rows in a given table. You can use the query params to"
        " filter your results."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/server/tables#tablesCreate)."
        ),
    ),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long."
        ),
    ),
)


create_row = service.operation(
    "create-row",
    "POST",
    "/databases/{databaseId}/tables/{tableId}/rows",
    (
        "Create a new Row. Before using this route, you should create a new table resource using"
        " either a [server"
        " integration](https://appwrite.io/docs/server/databases#databasesCreateTable) API or"
        " directly from your database console."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/server/tables#tablesCreate). Make sure to"
            " define columns before creating rows."
        ),
    ),
    Param(
        "rowId",
        required=True,
        help=(
            "Row ID. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid chars"
            " are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special char."
            " Max length is 36 chars."
        ),
    ),
    Param("data", OBJECT, required=True, help="Row data as JSON object."),
    Param(
        "permissions",
        ARRAY,
        help=(
            "An array of permissions strings. By default, only the current user is granted all"
            " permissions. [Learn more about permissions](https://appwrite.io/docs/permissions)."
        ),
    ),
)


create_rows = service.operation(
    "create-rows",
    "POST",
    "/databases/{databaseId}/tables/{tableId}/rows",
    (
        "Create new Rows. Before using this route, you should create a new table resource using"
        " either a [server"
        " integration](https://appwrite.io/docs/server/databases#databasesCreateTable) API or"
        " directly from your database console."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/server/tables#tablesCreate). Make sure to"
            " define columns before creating rows."
        ),
    ),
    Param("rows", OBJECT_ARRAY, required=True, help="Array of documents data as JSON objects."),
)


upsert_rows = service.operation(
    "upsert-rows",
    "PUT",
    "/databases/{databaseId}/tables/{tableId}/rows",
    (
        "Create or update Rows. Before using this route, you should create a new table resource"
        " using either a [server"
        " integration](https://appwrite.io/docs/server/databases#databasesCreateTable) API or"
        " directly from your database console."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
)


update_rows = service.operation(
    "update-rows",
    "PATCH",
    "/databases/{databaseId}/tables/{tableId}/rows",
    (
        "Update all rows that match your queries, if no queries are submitted then all rows are"
        " updated. You can pass only specific fields to be updated."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param(
        "data",
        OBJECT,
        help="Row data as JSON object. Include only column and value pairs to be updated.",
    ),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long."
        ),
    ),
)


delete_rows = service.operation(
    "delete-rows",
    "DELETE",
    "/databases/{databaseId}/tables/{tableId}/rows",
    "Bulk delete rows using queries, if no queries are passed then all rows are deleted.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/server/tables#tablesCreate)."
        ),
    ),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long."
        ),
    ),
)


get_row = service.operation(
    "get-row",
    "GET",
    "/databases/{databaseId}/tables/{tableId}/rows/{rowId}",
    "Get a row by its unique ID. This endpoint response returns a JSON object with the row data.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/server/tables#tablesCreate)."
        ),
    ),
    Param("rowId", required=True, help="Row ID."),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long."
        ),
    ),
)


upsert_row = service.operation(
    "upsert-row",
    "PUT",
    "/databases/{databaseId}/tables/{tableId}/rows/{rowId}",
    (
        "Create or update a Row. Before using this route, you should create a new table resource"
        " using either a [server"
        " integration](https://appwrite.io/docs/server/databases#databasesCreateTable) API or"
        " directly from your database console."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("rowId", required=True, help="Row ID."),
)


update_row = service.operation(
    "update-row",
    "PATCH",
    "/databases/{databaseId}/tables/{tableId}/rows/{rowId}",
    (
        "Update a row by its unique ID. Using the patch method you can pass only specific fields"
        " that will get updated."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("rowId", required=True, help="Row ID."),
    Param(
        "data",
        OBJECT,
        help="Row data as JSON object. Include only columns and value pairs to be updated.",
    ),
    Param(
        "permissions",
        ARRAY,
        help=(
            "An array of permissions strings. By default, the current permissions are inherited."
            " [Learn more about permissions](https://appwrite.io/docs/permissions)."
        ),
    ),
)


delete_row = service.operation(
    "delete-row",
    "DELETE",
    "/databases/{databaseId}/tables/{tableId}/rows/{rowId}",
    "Delete a row by its unique ID.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/server/tables#tablesCreate)."
        ),
    ),
    Param("rowId", required=True, help="Row ID."),
)


list_row_logs = service.operation(
    "list-row-logs",
    "GET",
    "/databases/{databaseId}/tables/{tableId}/rows/{rowId}/logs",
    "Get the row activity logs list by its unique ID.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("rowId", required=True, help="Row ID."),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Only supported methods are"
            " limit and offset"
        ),
    ),
)


decrement_row_column = service.operation(
    "decrement-row-column",
    "PATCH",
    "/databases/{databaseId}/tables/{tableId}/rows/{rowId}/{column}/decrement",
    "Decrement a specific column of a row by a given value.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("rowId", required=True, help="Row ID."),
    Param("column", required=True, help="Column key."),
    Param("value", INTEGER, help="Value to increment the column by. The value must be a number."),
    Param(
        "min",
        INTEGER,
        help=(
            "Minimum value for the column. If the current value is lesser than this value, an"
            " exception will be thrown."
        ),
    ),
)


increment_row_column = service.operation(
    "increment-row-column",
    "PATCH",
    "/databases/{databaseId}/tables/{tableId}/rows/{rowId}/{column}/increment",
    "Increment a specific column of a row by a given value.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("rowId", required=True, help="Row ID."),
    Param("column", required=True, help="Column key."),
    Param("value", INTEGER, help="Value to increment the column by. The value must be a number."),
    Param(
        "max",
        INTEGER,
        help=(
            "Maximum value for the column. If the current value is greater than this value, an"
            " error will be thrown."
        ),
    ),
)


get_usage = service.operation(
    "get-usage",
    "GET",
    "/databases/{databaseId}/tables/{tableId}/usage",
    (
        "Get usage metrics and statistics for a table. Returning the total number of rows. The"
        " response includes both current totals and historical data over time. Use the optional"
        " range parameter to specify the time window for historical data: 24h (last 24 hours), 30d"
        " (last 30 days), or 90d (last 90 days). If not specified, range defaults to 30 days."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("range", help="Date range."),
)
