"""
CLI entry point for row-transform.

Usage:
    python -m row_transform.cli --template config/templates/customers.yml \
        --input customers.csv --output customers.json
"""

import sys

from row_transform.cli.transform_rows import main

if __name__ == "__main__":
    sys.exit(main())
