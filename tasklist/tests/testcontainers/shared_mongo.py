import atexit

from tasklist.tests.testcontainers.mongo_container import MongoReplicaSetContainer

_mongo_container = None
_startup_error = None


def _cleanup_mongo_container():
    global _mongo_container
    if _mongo_container is not None:
        try:
            _mongo_container.stop()
        except Exception as e:
            print("Failed to stop MongoDB container:", str(e))


def get_shared_mongo_container():
    """
    Start one MongoDB container for the whole test run.

    A failed start is remembered so later test classes skip immediately instead of retrying.
    """
    global _mongo_container, _startup_error
    if _startup_error is not None:
        raise _startup_error
    if _mongo_container is None:
        try:
            container = MongoReplicaSetContainer()
            container.start()
        except Exception as e:
            print("Failed to start MongoDB container:", str(e))
            _startup_error = e
            raise
        _mongo_container = container
        atexit.register(_cleanup_mongo_container)

    return _mongo_container
