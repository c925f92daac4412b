"""Allow ``python -m neokikoeru_bucket``."""

from neokikoeru_bucket.main import main

main()
