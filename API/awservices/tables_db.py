"""TablesDB: databases, transactions, tables, columns, indexes and rows."""

from .base import ARRAY, BOOLEAN, FLOAT, INTEGER, INTEGER_ARRAY, OBJECT, OBJECT_ARRAY, Param, Service


service = Service(
    "tables-db",
    (
        "The tables-db command allows you to create structured tables of columns and query and"
        " filter lists of rows."
    ),
)


list_databases = service.operation(
    "list",
    "GET",
    "/tablesdb",
    (
        "Get a list of all databases from the current Appwrite project. You can use the search"
        " parameter to filter your results."
    ),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long. You may filter on the following columns: name"
        ),
    ),
    Param("search", help="Search term to filter your list results. Max length: 256 chars."),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


create_database = service.operation(
    "create",
    "POST",
    "/tablesdb",
    "Create a new Database.",
    Param(
        "databaseId",
        required=True,
        help=(
            "Unique Id. Choose a custom ID or generate a random ID with 'ID.unique()'. Valid"
            " chars are a-z, A-Z, 0-9, period, hyphen, and underscore. Can't start with a special"
            " char. Max length is 36 chars."
        ),
    ),
    Param("name", required=True, help="Database name. Max length: 128 chars."),
    Param(
        "enabled",
        BOOLEAN,
        help=(
            "Is the database enabled? When set to 'disabled', users cannot access the database"
            " but Server SDKs with an API key can still read and write to the database. No data is"
            " lost when this is toggled."
        ),
    ),
)


list_transactions = service.operation(
    "list-transactions",
    "GET",
    "/tablesdb/transactions",
    "List transactions across all databases.",
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries)."
        ),
    ),
)


create_transaction = service.operation(
    "create-transaction",
    "POST",
    "/tablesdb/transactions",
    "Create a new transaction.",
    Param("ttl", INTEGER, help="Seconds before the transaction expires."),
)


get_transaction = service.operation(
    "get-transaction",
    "GET",
    "/tablesdb/transactions/{transactionId}",
    "Get a transaction by its unique ID.",
    Param("transactionId", required=True, help="Transaction ID."),
)


update_transaction = service.operation(
    "update-transaction",
    "PATCH",
    "/tablesdb/transactions/{transactionId}",
    "Update a transaction, to either commit or roll back its operations.",
    Param("transactionId", required=True, help="Transaction ID."),
    Param("commit", BOOLEAN, help="Commit transaction?"),
    Param("rollback", BOOLEAN, help="Rollback transaction?"),
)


delete_transaction = service.operation(
    "delete-transaction",
    "DELETE",
    "/tablesdb/transactions/{transactionId}",
    "Delete a transaction by its unique ID.",
    Param("transactionId", required=True, help="Transaction ID."),
)


create_operations = service.operation(
    "create-operations",
    "POST",
    "/tablesdb/transactions/{transactionId}/operations",
    "Create multiple operations in a single transaction.",
    Param("transactionId", required=True, help="Transaction ID."),
    Param("operations", OBJECT_ARRAY, help="Array of staged operations."),
)


list_usage = service.operation(
    "list-usage",
    "GET",
    "/tablesdb/usage",
    (
        "List usage metrics and statistics for all databases in the project. You can view the"
        " total number of databases, tables, rows, and storage usage. The response includes both"
        " current totals and historical data over time. Use the optional range parameter to"
        " specify the time window for historical data: 24h (last 24 hours), 30d (last 30 days), or"
        " 90d (last 90 days). If not specified, range defaults to 30 days."
    ),
    Param("range", help="Date range."),
)


get_database = service.operation(
    "get",
    "GET",
    "/tablesdb/{databaseId}",
    (
        "Get a database by its unique ID. This endpoint response returns a JSON object with the"
        " database metadata."
    ),
    Param("databaseId", required=True, help="Database ID."),
)


update_database = service.operation(
    "update",
    "PUT",
    "/tablesdb/{databaseId}",
    "Update a database by its unique ID.",
    Param("databaseId", required=True, help="Database ID."),
    Param("name", required=True, help="Database name. Max length: 128 chars."),
    Param(
        "enabled",
        BOOLEAN,
        help=(
            "Is database enabled? When set to 'disabled', users cannot access the database but"
            " Server SDKs with an API key can still read and write to the database. No data is"
            " lost when this is toggled."
        ),
    ),
)


delete_database = service.operation(
    "delete",
    "DELETE",
    "/tablesdb/{databaseId}",
    (
        "Delete a database by its unique ID. Only API keys with with databases.write scope can"
        " delete a database."
    ),
    Param("databaseId", required=True, help="Database ID."),
)


list_tables = service.operation(
    "list-tables",
    "GET",
    "/tablesdb/{databaseId}/tables",
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
            " allowed, each 4096 characters long. You may filter on the following columns: name,"
            " enabled, rowSecurity"
        ),
    ),
    Param("search", help="Search term to filter your list results. Max length: 256 chars."),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


create_table = service.operation(
    "create-table",
    "POST",
    "/tablesdb/{databaseId}/tables",
    (
        "Create a new Table. Before using this route, you should create a new database resource"
        " using either a [server"
        " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)"
        " API or directly from your database console."
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
    Param(
        "columns",
        OBJECT_ARRAY,
        help=(
            "Array of column definitions to create. Each column should contain: key (string),"
            " type (string: string, integer, float, boolean, datetime, relationship), size"
            " (integer, required for string type), required (boolean, optional), default (mixed,"
            " optional), array (boolean, optional), and type-specific options."
        ),
    ),
    Param(
        "indexes",
        OBJECT_ARRAY,
        help=(
            "Array of index definitions to create. Each index should contain: key (string), type"
            " (string: key, fulltext, unique, spatial), attributes (array of column keys), orders"
            " (array of ASC/DESC, optional), and lengths (array of integers, optional)."
        ),
    ),
)


get_table = service.operation(
    "get-table",
    "GET",
    "/tablesdb/{databaseId}/tables/{tableId}",
    (
        "Get a table by its unique ID. This endpoint response returns a JSON object with the"
        " table metadata."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
)


update_table = service.operation(
    "update-table",
    "PUT",
    "/tablesdb/{databaseId}/tables/{tableId}",
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
            " table-level permissions to access a row. [Learn more about"
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
    "delete-table",
    "DELETE",
    "/tablesdb/{databaseId}/tables/{tableId}",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns",
    "List columns in the table.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long. You may filter on the following columns: key,"
            " type, size, required, array, status, error"
        ),
    ),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


create_boolean_column = service.operation(
    "create-boolean-column",
    "POST",
    "/tablesdb/{databaseId}/tables/{tableId}/columns/boolean",
    "Create a boolean column.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/boolean/{key}",
    "Update a boolean column. Changing the 'default' value will not update already existing rows.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/datetime",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/datetime/{key}",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/email",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/email/{key}",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/enum",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/enum/{key}",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/float",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/float/{key}",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/integer",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/integer/{key}",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/ip",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/ip/{key}",
    "Update an ip column. Changing the 'default' value will not update already existing rows.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param("default", help="Default value. Cannot be set when column is required."),
    Param("newKey", help="New Column Key."),
)


create_line_column = service.operation(
    "create-line-column",
    "POST",
    "/tablesdb/{databaseId}/tables/{tableId}/columns/line",
    "Create a geometric line column.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the TablesDB service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
        ),
    ),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        OBJECT,
        help=(
            "Default value for column when not provided, two-dimensional array of coordinate"
            " pairs, [[longitude, latitude], [longitude, latitude], …], listing the vertices of"
            " the line in order. Cannot be set when column is required."
        ),
    ),
)


update_line_column = service.operation(
    "update-line-column",
    "PATCH",
    "/tablesdb/{databaseId}/tables/{tableId}/columns/line/{key}",
    "Update a line column. Changing the 'default' value will not update already existing rows.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the TablesDB service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
        ),
    ),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        OBJECT,
        help=(
            "Default value for column when not provided, two-dimensional array of coordinate"
            " pairs, [[longitude, latitude], [longitude, latitude], …], listing the vertices of"
            " the line in order. Cannot be set when column is required."
        ),
    ),
    Param("newKey", help="New Column Key."),
)


create_point_column = service.operation(
    "create-point-column",
    "POST",
    "/tablesdb/{databaseId}/tables/{tableId}/columns/point",
    "Create a geometric point column.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the TablesDB service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
        ),
    ),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        OBJECT,
        help=(
            "Default value for column when not provided, array of two numbers [longitude,"
            " latitude], representing a single coordinate. Cannot be set when column is required."
        ),
    ),
)


update_point_column = service.operation(
    "update-point-column",
    "PATCH",
    "/tablesdb/{databaseId}/tables/{tableId}/columns/point/{key}",
    "Update a point column. Changing the 'default' value will not update already existing rows.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the TablesDB service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
        ),
    ),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        OBJECT,
        help=(
            "Default value for column when not provided, array of two numbers [longitude,"
            " latitude], representing a single coordinate. Cannot be set when column is required."
        ),
    ),
    Param("newKey", help="New Column Key."),
)


create_polygon_column = service.operation(
    "create-polygon-column",
    "POST",
    "/tablesdb/{databaseId}/tables/{tableId}/columns/polygon",
    "Create a geometric polygon column.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the TablesDB service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
        ),
    ),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        OBJECT,
        help=(
            "Default value for column when not provided, three-dimensional array where the outer"
            " array holds one or more linear rings, [[[longitude, latitude], …], …], the first"
            " ring is the exterior boundary, any additional rings are interior holes, and each"
            " ring must start and end with the same coordinate pair. Cannot be set when column is"
            " required."
        ),
    ),
)


update_polygon_column = service.operation(
    "update-polygon-column",
    "PATCH",
    "/tablesdb/{databaseId}/tables/{tableId}/columns/polygon/{key}",
    "Update a polygon column. Changing the 'default' value will not update already existing rows.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the TablesDB service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
        ),
    ),
    Param("key", required=True, help="Column Key."),
    Param("required", BOOLEAN, required=True, help="Is column required?"),
    Param(
        "default",
        OBJECT,
        help=(
            "Default value for column when not provided, three-dimensional array where the outer"
            " array holds one or more linear rings, [[[longitude, latitude], …], …], the first"
            " ring is the exterior boundary, any additional rings are interior holes, and each"
            " ring must start and end with the same coordinate pair. Cannot be set when column is"
            " required."
        ),
    ),
    Param("newKey", help="New Column Key."),
)


create_relationship_column = service.operation(
    "create-relationship-column",
    "POST",
    "/tablesdb/{databaseId}/tables/{tableId}/columns/relationship",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/string",
    "Create a string column.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
        ),
    ),
    Param("key", required=True, help="Column Key."),
    Param(
        "size",
        INTEGER,
        required=True,
        help="Column size for text columns, in number of characters.",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/string/{key}",
    "Update a string column. Changing the 'default' value will not update already existing rows.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/url",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/url/{key}",
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
    "/tablesdb/{databaseId}/tables/{tableId}/columns/{key}",
    "Get column by ID.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
)


delete_column = service.operation(
    "delete-column",
    "DELETE",
    "/tablesdb/{databaseId}/tables/{tableId}/columns/{key}",
    "Deletes a column.",
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("key", required=True, help="Column Key."),
)


update_relationship_column = service.operation(
    "update-relationship-column",
    "PATCH",
    "/tablesdb/{databaseId}/tables/{tableId}/columns/{key}/relationship",
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
    "/tablesdb/{databaseId}/tables/{tableId}/indexes",
    "List indexes on the table.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
        ),
    ),
    Param(
        "queries",
        ARRAY,
        help=(
            "Array of query strings generated using the Query class provided by the SDK. [Learn"
            " more about queries](https://appwrite.io/docs/queries). Maximum of 100 queries are"
            " allowed, each 4096 characters long. You may filter on the following columns: key,"
            " type, status, attributes, error"
        ),
    ),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


create_index = service.operation(
    "create-index",
    "POST",
    "/tablesdb/{databaseId}/tables/{tableId}/indexes",
    (
        "Creates an index on the columns listed. Your index should include all the columns you"
        " will query in a single request. Type can be 'key', 'fulltext', or 'unique'."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
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
    "/tablesdb/{databaseId}/tables/{tableId}/indexes/{key}",
    "Get index by ID.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
        ),
    ),
    Param("key", required=True, help="Index Key."),
)


delete_index = service.operation(
    "delete-index",
    "DELETE",
    "/tablesdb/{databaseId}/tables/{tableId}/indexes/{key}",
    "Delete an index.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the TablesDB service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
        ),
    ),
    Param("key", required=True, help="Index Key."),
)


list_table_logs = service.operation(
    "list-table-logs",
    "GET",
    "/tablesdb/{databaseId}/tables/{tableId}/logs",
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
    "/tablesdb/{databaseId}/tables/{tableId}/rows",
    (
        "Get a list of all the user's rows in a given table. You can use the query params to"
        " filter your results."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the TablesDB service [server"
            " integration](https://appwrite.io/docs/products/databases/tables#create-table)."
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
    Param(
        "transactionId",
        help="Transaction ID to read uncommitted changes within the transaction.",
    ),
    Param(
        "total",
        BOOLEAN,
        help="When set to false, the total count returned will be 0 and will not be calculated.",
    ),
)


create_row = service.operation(
    "create-row",
    "POST",
    "/tablesdb/{databaseId}/tables/{tableId}/rows",
    (
        "Create a new Row. Before using this route, you should create a new table resource using"
        " either a [server"
        " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)"
        " API or directly from your database console."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
            " Make sure to define columns before creating rows."
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
    Param("transactionId", help="Transaction ID for staging the operation."),
)


create_rows = service.operation(
    "create-rows",
    "POST",
    "/tablesdb/{databaseId}/tables/{tableId}/rows",
    (
        "Create new Rows. Before using this route, you should create a new table resource using"
        " either a [server"
        " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)"
        " API or directly from your database console."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
            " Make sure to define columns before creating rows."
        ),
    ),
    Param("rows", OBJECT_ARRAY, required=True, help="Array of rows data as JSON objects."),
    Param("transactionId", help="Transaction ID for staging the operation."),
)


upsert_rows = service.operation(
    "upsert-rows",
    "PUT",
    "/tablesdb/{databaseId}/tables/{tableId}/rows",
    (
        "Create or update Rows. Before using this route, you should create a new table resource"
        " using either a [server"
        " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)"
        " API or directly from your database console."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param(
        "rows",
        OBJECT_ARRAY,
        required=True,
        help="Array of row data as JSON objects. May contain partial rows.",
    ),
    Param("transactionId", help="Transaction ID for staging the operation."),
)


update_rows = service.operation(
    "update-rows",
    "PATCH",
    "/tablesdb/{databaseId}/tables/{tableId}/rows",
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
    Param("transactionId", help="Transaction ID for staging the operation."),
)


delete_rows = service.operation(
    "delete-rows",
    "DELETE",
    "/tablesdb/{databaseId}/tables/{tableId}/rows",
    "Bulk delete rows using queries, if no queries are passed then all rows are deleted.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
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
    Param("transactionId", help="Transaction ID for staging the operation."),
)


get_row = service.operation(
    "get-row",
    "GET",
    "/tablesdb/{databaseId}/tables/{tableId}/rows/{rowId}",
    "Get a row by its unique ID. This endpoint response returns a JSON object with the row data.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
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
    Param(
        "transactionId",
        help="Transaction ID to read uncommitted changes within the transaction.",
    ),
)


upsert_row = service.operation(
    "upsert-row",
    "PUT",
    "/tablesdb/{databaseId}/tables/{tableId}/rows/{rowId}",
    (
        "Create or update a Row. Before using this route, you should create a new table resource"
        " using either a [server"
        " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)"
        " API or directly from your database console."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("tableId", required=True, help="Table ID."),
    Param("rowId", required=True, help="Row ID."),
    Param(
        "data",
        OBJECT,
        help=(
            "Row data as JSON object. Include all required columns of the row to be created or"
            " updated."
        ),
    ),
    Param(
        "permissions",
        ARRAY,
        help=(
            "An array of permissions strings. By default, the current permissions are inherited."
            " [Learn more about permissions](https://appwrite.io/docs/permissions)."
        ),
    ),
    Param("transactionId", help="Transaction ID for staging the operation."),
)


update_row = service.operation(
    "update-row",
    "PATCH",
    "/tablesdb/{databaseId}/tables/{tableId}/rows/{rowId}",
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
    Param("transactionId", help="Transaction ID for staging the operation."),
)


delete_row = service.operation(
    "delete-row",
    "DELETE",
    "/tablesdb/{databaseId}/tables/{tableId}/rows/{rowId}",
    "Delete a row by its unique ID.",
    Param("databaseId", required=True, help="Database ID."),
    Param(
        "tableId",
        required=True,
        help=(
            "Table ID. You can create a new table using the Database service [server"
            " integration](https://appwrite.io/docs/references/cloud/server-dart/tablesDB#createTable)."
        ),
    ),
    Param("rowId", required=True, help="Row ID."),
    Param("transactionId", help="Transaction ID for staging the operation."),
)


list_row_logs = service.operation(
    "list-row-logs",
    "GET",
    "/tablesdb/{databaseId}/tables/{tableId}/rows/{rowId}/logs",
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
    "/tablesdb/{databaseId}/tables/{tableId}/rows/{rowId}/{column}/decrement",
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
    Param("transactionId", help="Transaction ID for staging the operation."),
)


increment_row_column = service.operation(
    "increment-row-column",
    "PATCH",
    "/tablesdb/{databaseId}/tables/{tableId}/rows/{rowId}/{column}/increment",
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
    Param("transactionId", help="Transaction ID for staging the operation."),
)


get_table_usage = service.operation(
    "get-table-usage",
    "GET",
    "/tablesdb/{databaseId}/tables/{tableId}/usage",
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


get_usage = service.operation(
    "get-usage",
    "GET",
    "/tablesdb/{databaseId}/usage",
    (
        "Get usage metrics and statistics for a database. You can view the total number of"
        " tables, rows, and storage usage. The response includes both current totals and"
        " historical data over time. Use the optional range parameter to specify the time window"
        " for historical data: 24h (last 24 hours), 30d (last 30 days), or 90d (last 90 days). If"
        " not specified, range defaults to 30 days."
    ),
    Param("databaseId", required=True, help="Database ID."),
    Param("range", help="Date range."),
)
