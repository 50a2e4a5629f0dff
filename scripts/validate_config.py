#!/usr/bin/env python3
"""Configuration validation script."""

import sys

from artha_app.config.loader import ConfigLoader
from artha_app.config.validation import ConfigValidator
from artha_app.models.investments import InstrumentId


def main():
    """Main validation function."""
    print("🔍 Validating Artha App configuration...")

    loader = ConfigLoader.create()
    all_valid = True

    print("\n📋 Validating settings.yaml...")
    errors = ConfigValidator.validate_config(loader.merge_config())
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("✅ Settings are valid")

    for instrument_id in InstrumentId:
        overrides = loader.load_instrument_config(instrument_id.value)
        if not overrides:
            continue

        print(f"\n📊 Validating {instrument_id.value} overrides...")
        errors = ConfigValidator.validate_instrument_overrides(instrument_id.value, overrides)
        if errors:
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ {instrument_id.value} overrides are valid")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
