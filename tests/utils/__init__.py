"""
Test utilities package for tw-l10n-sync tests.

## Available Modules

### helpers.py
- `create_temp_config_file()`: Context manager for temporary YAML config files
- `create_scratch_gui()`, `create_packager()`, `create_desktop()`,
  `create_scratch_vm()`: Build minimal sibling checkouts under a workspace
- `write_descriptors()`, `read_json()`: JSON file helpers

### fake_service.py
- `FakeTranslationService`: In-memory translation service with failure
  injection and in-flight tracking
"""
