from dbdelta.adapter.cursor.dbapi import *
