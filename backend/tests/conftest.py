import os
import tempfile

# Point the app at a throwaway database before products_api.config is imported.
_tmpdir = tempfile.mkdtemp(prefix="products_api_tests_")
os.environ["DATA__DEFAULT_CONNECTION__CONNECTION_STRING"] = "sqlite:///" + os.path.join(_tmpdir, "test.db")
os.environ["MIGRATION_LOCK_PATH"] = os.path.join(_tmpdir, "migrate.lock")
