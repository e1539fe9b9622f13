import pycouchdb

from app.settings import settings


def get_couch():
    """
    Open the CouchDB database holding the blog documents.
    Called at runtime to avoid import-time connections.
    """
    couch = pycouchdb.Server(settings.couchdb_url)
    return couch.database(settings.COUCHDB_DATABASE)
