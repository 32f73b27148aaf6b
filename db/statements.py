"""
db/statements.py
----------------
The SQL statements used by all repositories, grouped by operation kind.

This is the only module that names tables and columns. Statements use
psycopg2 named placeholders (``%(name)s``); values are always bound by the
driver, never formatted into the text. ``user`` is a reserved word in
PostgreSQL, so that table is always quoted.

Soft-deleted rows (``deletedat IS NOT NULL``) are hidden from list and
by-name reads but stay visible to by-id reads and to the user name
existence check, which keeps a deleted user's name reserved.
"""

_USER_COLUMNS = """
    id, username, clientidprefix, clientid, validateclientid, throttleuser,
    monthlybytelimit, passwordhash, createdat, updatedat, deletedat
"""

_BLACKLIST_WHITELIST_COLUMNS = """
    id, userid, listkind, type, value, createdat, updatedat, deletedat
"""

_DATABASE_VERSION_COLUMNS = """
    id, name, number, createdat, updatedat, deletedat
"""


class Select:
    """Read statements, including existence checks."""

    ALL_USERS = f"""
        SELECT {_USER_COLUMNS} FROM "user"
        WHERE deletedat IS NULL
        ORDER BY username;
    """

    USER_BY_ID = f'SELECT {_USER_COLUMNS} FROM "user" WHERE id = %(id)s;'

    USER_BY_USER_NAME = f"""
        SELECT {_USER_COLUMNS} FROM "user"
        WHERE username = %(user_name)s AND deletedat IS NULL;
    """

    USER_NAME_AND_ID_BY_USER_NAME = """
        SELECT username, id FROM "user"
        WHERE username = %(user_name)s AND deletedat IS NULL;
    """

    USER_NAME_EXISTS = """
        SELECT EXISTS (SELECT 1 FROM "user" WHERE username = %(user_name)s);
    """

    ALL_CLIENT_ID_PREFIXES = """
        SELECT clientidprefix FROM "user"
        WHERE deletedat IS NULL
        ORDER BY clientidprefix;
    """

    BLACKLIST_WHITELIST_ITEMS_FOR_USER = f"""
        SELECT {_BLACKLIST_WHITELIST_COLUMNS} FROM blacklistwhitelist b
        WHERE b.userid = %(user_id)s
          AND b.listkind = %(list_kind)s
          AND b.type = %(type)s
          AND b.deletedat IS NULL
          AND EXISTS (
              SELECT 1 FROM "user" u WHERE u.id = b.userid AND u.deletedat IS NULL
          )
        ORDER BY b.createdat;
    """

    BLACKLIST_WHITELIST_ITEM_BY_ID = (
        f"SELECT {_BLACKLIST_WHITELIST_COLUMNS} FROM blacklistwhitelist WHERE id = %(id)s;"
    )

    ALL_DATABASE_VERSIONS = f"""
        SELECT {_DATABASE_VERSION_COLUMNS} FROM databaseversion
        WHERE deletedat IS NULL
        ORDER BY number;
    """

    DATABASE_VERSION_BY_ID = (
        f"SELECT {_DATABASE_VERSION_COLUMNS} FROM databaseversion WHERE id = %(id)s;"
    )

    DATABASE_VERSION_BY_NAME = f"""
        SELECT {_DATABASE_VERSION_COLUMNS} FROM databaseversion
        WHERE name = %(name)s AND deletedat IS NULL
        ORDER BY number DESC, createdat DESC
        LIMIT 1;
    """


class Insert:
    """Single-row inserts. Callers expect exactly one affected row."""

    USER = """
        INSERT INTO "user" (
            id, username, clientidprefix, clientid, validateclientid, throttleuser,
            monthlybytelimit, passwordhash, createdat
        )
        VALUES (
            %(id)s, %(user_name)s, %(client_id_prefix)s, %(client_id)s,
            %(validate_client_id)s, %(throttle_user)s, %(monthly_byte_limit)s,
            %(password_hash)s, %(created_at)s
        );
    """

    BLACKLIST_WHITELIST_ITEM = """
        INSERT INTO blacklistwhitelist (id, userid, listkind, type, value, createdat)
        VALUES (%(id)s, %(user_id)s, %(list_kind)s, %(type)s, %(value)s, %(created_at)s);
    """

    DATABASE_VERSION = """
        INSERT INTO databaseversion (id, name, number, createdat)
        VALUES (%(id)s, %(name)s, %(number)s, %(created_at)s);
    """


class Update:
    """Field updates and soft-delete markers. None of them clear ``deletedat``."""

    USER = """
        UPDATE "user"
        SET username = %(user_name)s,
            clientidprefix = %(client_id_prefix)s,
            clientid = %(client_id)s,
            validateclientid = %(validate_client_id)s,
            throttleuser = %(throttle_user)s,
            monthlybytelimit = %(monthly_byte_limit)s,
            passwordhash = %(password_hash)s,
            updatedat = now()
        WHERE id = %(id)s;
    """

    RESET_PASSWORD_FOR_USER = """
        UPDATE "user"
        SET passwordhash = %(password_hash)s, updatedat = now()
        WHERE id = %(id)s;
    """

    MARK_USER_AS_DELETED = """
        UPDATE "user" SET deletedat = now()
        WHERE id = %(id)s AND deletedat IS NULL;
    """

    BLACKLIST_WHITELIST_ITEM = """
        UPDATE blacklistwhitelist
        SET listkind = %(list_kind)s,
            type = %(type)s,
            value = %(value)s,
            updatedat = now()
        WHERE id = %(id)s;
    """

    MARK_BLACKLIST_WHITELIST_ITEM_AS_DELETED = """
        UPDATE blacklistwhitelist SET deletedat = now()
        WHERE id = %(id)s AND deletedat IS NULL;
    """

    DATABASE_VERSION = """
        UPDATE databaseversion
        SET name = %(name)s, number = %(number)s, updatedat = now()
        WHERE id = %(id)s;
    """

    MARK_DATABASE_VERSION_AS_DELETED = """
        UPDATE databaseversion SET deletedat = now()
        WHERE id = %(id)s AND deletedat IS NULL;
    """


class Delete:
    """Irreversible row removal."""

    USER = 'DELETE FROM "user" WHERE id = %(id)s;'

    BLACKLIST_WHITELIST_ITEM = "DELETE FROM blacklistwhitelist WHERE id = %(id)s;"

    DATABASE_VERSION = "DELETE FROM databaseversion WHERE id = %(id)s;"
