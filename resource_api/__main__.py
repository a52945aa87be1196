"""
Resource API - Process Entry Point
====================================

    $ PORT=4000 python -m resource_api
    $ PORT=4000 resource-api

Missing or invalid configuration (PORT is required) is reported on stderr
and the process exits with status 1 before anything binds.
"""

import sys

from pydantic import ValidationError


def main() -> None:
    try:
        from resource_api.main import run
    except ValidationError as e:
        sys.stderr.write(f"Invalid configuration, refusing to start:\n{e}\n")
        sys.exit(1)
    run()


if __name__ == "__main__":
    main()
