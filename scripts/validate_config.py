#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from patterns_app.catalog import list_examples
from patterns_app.config.loader import ConfigLoader
from patterns_app.config.validation import ConfigValidator, ValidationError


def validate_example_config(loader: ConfigLoader, example_name: Optional[str]) -> List[ValidationError]:
    """Validate merged configuration for one example (None: global only)."""
    return ConfigValidator.validate_config(loader.merge_config(example_name))


def main():
    """Main validation function."""
    print("🔍 Validating pattern catalogue configuration...")

    loader = ConfigLoader.create()
    print(f"📁 Config directory: {loader.config_dir}")

    all_valid = True
    targets = [None] + [spec.name for spec in list_examples()]

    for example_name in targets:
        label = example_name or "global defaults"
        errors = validate_example_config(loader, example_name)

        if errors:
            print(f"❌ {label}: {len(errors)} validation error(s)")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ {label}")

    if all_valid:
        print("\n🎉 All configurations are valid!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
