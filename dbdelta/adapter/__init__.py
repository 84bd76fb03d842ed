from dbdelta.adapter import config, connection_provider, cursor, log, statement_pool
