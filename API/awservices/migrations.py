"""Migrations: imports from other platforms, CSV import/export and reports."""

from .base import ARRAY, BOOLEAN, INTEGER, Param, Service


service = Service(
    "migrations",
    "The migrations command allows you to migrate data between services.",
)


list_migrations = service.operation(
    "list",
    "GET",
    "/migrations",
    (
        "List all migrations in the current project. This endpoint returns a list of all"
        " migrations including their status, progress, and any errors that occurred during the"
        " migration process."
    ),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/databases#querying-documents). Maximum"
            " of 100 queries are allowed, each 4096 characters long. You may filter on the"
            " following attributes: status, stage, source, destination, resources, statusCounters,"
            " resourceData, errors"
        ),
    ),
    Param("search", help="Search term to filter your list results. Max length: 256 chars."),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


create_appwrite_migration = service.operation(
    "create-appwrite-migration",
    "POST",
    "/migrations/appwrite",
    (
        "Migrate data from another Appwrite project to your current project. This endpoint allows"
        " you to migrate resources like databases, collections, documents, users, and files from"
        " an existing Appwrite project."
    ),
    Param("resources", ARRAY, required=True, help="List of resources to migrate"),
    Param("endpoint", required=True, help="Source Appwrite endpoint"),
    Param("projectId", required=True, help="Source Project ID"),
    Param("apiKey", required=True, help="Source API Key"),
)


get_appwrite_report = service.operation(
    "get-appwrite-report",
    "GET",
    "/migrations/appwrite/report",
    (
        "Generate a report of the data in an Appwrite project before migrating. This endpoint"
        " analyzes the source project and returns information about the resources that can be"
        " migrated."
    ),
    Param("resources", ARRAY, required=True, help="List of resources to migrate"),
    Param("endpoint", required=True, help="Source's Appwrite Endpoint"),
    Param("projectID", required=True, help="Source's Project ID"),
    Param("key", required=True, help="Source's API Key"),
)


create_csv_export = service.operation(
    "create-csv-export",
    "POST",
    "/migrations/csv/exports",
    (
        "Export documents to a CSV file from your Appwrite database. This endpoint allows you to"
        " export documents to a CSV file stored in a secure internal bucket. You'll receive an"
        " email with a download link when the export is complete."
    ),
    Param(
        "resourceId",
        required=True,
        help=(
            "Composite ID in the format {databaseId:collectionId}, identifying a collection"
            " within a database to export."
        ),
    ),
    Param(
        "filename",
        required=True,
        help="The name of the file to be created for the export, excluding the .csv extension.",
    ),
    Param(
        "columns",
        ARRAY,
        help=(
            "List of attributes to export. If empty, all attributes will be exported. You can use"
            " the '*' wildcard to export all attributes from the collection."
        ),
    ),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK to filter"
            " documents to export. [Learn more about"
            " queries](https://appwrite.io/docs/databases#querying-documents). Maximum of 100"
            " queries are allowed, each 4096 characters long."
        ),
    ),
    Param("delimiter", help="The character that separates each column value. Default is comma."),
    Param(
        "enclosure",
        help="The character that encloses each column value. Default is double quotes.",
    ),
    Param(
        "escape",
        help="The escape character for the enclosure character. Default is double quotes.",
    ),
    Param(
        "header",
        BOOLEAN,
        help="Whether to include the header row with column names. Default is true.",
    ),
    Param(
        "notify",
        BOOLEAN,
        help="Set to true to receive an email when the export is complete. Default is true.",
    ),
)


create_csv_import = service.operation(
    "create-csv-import",
    "POST",
    "/migrations/csv/imports",
    (
        "Import documents from a CSV file into your Appwrite database. This endpoint allows you"
        " to import documents from a CSV file uploaded to Appwrite Storage bucket."
    ),
    Param(
        "bucketId",
        required=True,
        help=(
            "Storage bucket unique ID. You can create a new storage bucket using the Storage"
            " service [server integration](https://appwrite.io/docs/server/storage#createBucket)."
        ),
    ),
    Param("fileId", required=True, help="File ID."),
    Param(
        "resourceId",
        required=True,
        help=(
            "Composite ID in the format {databaseId:collectionId}, identifying a collection"
            " within a database."
        ),
    ),
    Param("internalFile", BOOLEAN, help="Is the file stored in an internal bucket?"),
)


create_firebase_migration = service.operation(
    "create-firebase-migration",
    "POST",
    "/migrations/firebase",
    (
        "Migrate data from a Firebase project to your Appwrite project. This endpoint allows you"
        " to migrate resources like authentication and other supported services from a Firebase"
        " project."
    ),
    Param("resources", ARRAY, required=True, help="List of resources to migrate"),
    Param(
        "serviceAccount",
        required=True,
        help="JSON of the Firebase service account credentials",
    ),
)


get_firebase_report = service.operation(
    "get-firebase-report",
    "GET",
    "/migrations/firebase/report",
    (
        "Generate a report of the data in a Firebase project before migrating. This endpoint"
        " analyzes the source project and returns information about the resources that can be"
        " migrated."
    ),
    Param("resources", ARRAY, required=True, help="List of resources to migrate"),
    Param(
        "serviceAccount",
        required=True,
        help="JSON of the Firebase service account credentials",
    ),
)


create_nhost_migration = service.operation(
    "create-n-host-migration",
    "POST",
    "/migrations/nhost",
    (
        "Migrate data from an NHost project to your Appwrite project. This endpoint allows you to"
        " migrate resources like authentication, databases, and other supported services from an"
        " NHost project."
    ),
    Param("resources", ARRAY, required=True, help="List of resources to migrate"),
    Param("subdomain", required=True, help="Source's Subdomain"),
    Param("region", required=True, help="Source's Region"),
    Param("adminSecret", required=True, help="Source's Admin Secret"),
    Param("database", required=True, help="Source's Database Name"),
    Param("username", required=True, help="Source's Database Username"),
    Param("password", required=True, help="Source's Database Password"),
    Param("port", INTEGER, help="Source's Database Port"),
)


get_nhost_report = service.operation(
    "get-n-host-report",
    "GET",
    "/migrations/nhost/report",
    (
        "Generate a detailed report of the data in an NHost project before migrating. This"
        " endpoint analyzes the source project and returns information about the resources that"
        " can be migrated."
    ),
    Param("resources", ARRAY, required=True, help="List of resources to migrate."),
    Param("subdomain", required=True, help="Source's Subdomain."),
    Param("region", required=True, help="Source's Region."),
    Param("adminSecret", required=True, help="Source's Admin Secret."),
    Param("database", required=True, help="Source's Database Name."),
    Param("username", required=True, help="Source's Database Username."),
    Param("password", required=True, help="Source's Database Password."),
    Param("port", INTEGER, help="Source's Database Port."),
)


create_supabase_migration = service.operation(
    "create-supabase-migration",
    "POST",
    "/migrations/supabase",
    (
        "Migrate data from a Supabase project to your Appwrite project. This endpoint allows you"
        " to migrate resources like authentication, databases, and other supported services from a"
        " Supabase project."
    ),
    Param("resources", ARRAY, required=True, help="List of resources to migrate"),
    Param("endpoint", required=True, help="Source's Supabase Endpoint"),
    Param("apiKey", required=True, help="Source's API Key"),
    Param("databaseHost", required=True, help="Source's Database Host"),
    Param("username", required=True, help="Source's Database Username"),
    Param("password", required=True, help="Source's Database Password"),
    Param("port", INTEGER, help="Source's Database Port"),
)


get_supabase_report = service.operation(
    "get-supabase-report",
    "GET",
    "/migrations/supabase/report",
    (
        "Generate a report of the data in a Supabase project before migrating. This endpoint"
        " analyzes the source project and returns information about the resources that can be"
        " migrated."
    ),
    Param("resources", ARRAY, required=True, help="List of resources to migrate"),
    Param("endpoint", required=True, help="Source's Supabase Endpoint."),
    Param("apiKey", required=True, help="Source's API Key."),
    Param("databaseHost", required=True, help="Source's Database Host."),
    Param("username", required=True, help="Source's Database Username."),
    Param("password", required=True, help="Source's Database Password."),
    Param("port", INTEGER, help="Source's Database Port."),
)


get_migration = service.operation(
    "get",
    "GET",
    "/migrations/{migrationId}",
    (
        "Get a migration by its unique ID. This endpoint returns detailed information about a"
        " specific migration including its current status, progress, and any errors that occurred"
        " during the migration process."
    ),
    Param("migrationId", required=True, help="Migration unique ID."),
)


retry_migration = service.operation(
    "retry",
    "PATCH",
    "/migrations/{migrationId}",
    (
        "Retry a failed migration. This endpoint allows you to retry a migration that has"
        " previously failed."
    ),
    Param("migrationId", required=True, help="Migration unique ID."),
)


delete_migration = service.operation(
    "delete",
    "DELETE",
    "/migrations/{migrationId}",
    (
        "Delete a migration by its unique ID. This endpoint allows you to remove a migration from"
        " your project's migration history."
    ),
    Param("migrationId", required=True, help="Migration ID."),
)
