from dbdelta.adapter.connection_provider.strategy import *
