from dbdelta.data.api import *
from dbdelta.data.column import *
from dbdelta.data.config import *
from dbdelta.data.connection_provider import *
from dbdelta.data.cursor import *
from dbdelta.data.data_set import *
from dbdelta.data.data_set_assertion import *
from dbdelta.data.data_source import *
from dbdelta.data.db import *
from dbdelta.data.db_config import *
from dbdelta.data.delta import *
from dbdelta.data.delta_assertion import *
from dbdelta.data.error import *
from dbdelta.data.log import *
from dbdelta.data.row import *
from dbdelta.data.row_multiset import *
