from dbdelta.service import assertion, data_source, setup, snapshot
