#!/usr/bin/env python3
"""Pricing configuration validation script."""

import sys
from pathlib import Path
from typing import Optional

from theater_billing.config.loader import ConfigLoader
from theater_billing.config.validation import ConfigValidator


def main(config_dir: Optional[str] = None) -> int:
    """Validate the merged pricing configuration."""
    loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
    print(f"Validating pricing configuration in {loader.config_dir}...")

    config = loader.merge_config()
    errors = ConfigValidator.validate_config(config)

    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value!r})")
        return 1

    print("Pricing configuration is valid")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
