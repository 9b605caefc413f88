"""Ajour - World of Warcraft addon manager, configuration core.

This package provides:
    - The persisted application configuration (ajour.yml) and its defaults
    - Versioned column layouts that survive round trips through older releases
    - Flavor-aware resolution of the AddOns, WTF and download directories
    - Load-or-default persistence that never blocks startup on a bad file

Package Structure:
    app: Startup orchestrator and command line entry point
    config: Configuration data model, directory resolver and persistence
    errors: Exception hierarchy shared by the configuration layer
    logging_config: Application-wide logging setup

Quick Start:
    Run from command line::

        ajour --debug

    Or programmatically::

        from ajour.config import load_config
        config = load_config()
        config.get_addon_directory_for_flavor(Flavor.RETAIL)

Configuration:
    - Config file: <config dir>/ajour.yml
    - Log file: <config dir>/ajour.log
    - <config dir> is $AJOUR_DATA_DIR, %APPDATA%/ajour or ~/.config/ajour
"""

__version__ = "1.3.2"
__app_name__ = "Ajour"
