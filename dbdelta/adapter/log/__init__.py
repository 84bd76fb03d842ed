from dbdelta.adapter.log.loguru_log import *
from dbdelta.adapter.log.memory import *
from dbdelta.adapter.log.null import *
from dbdelta.adapter.log.strategy import *
