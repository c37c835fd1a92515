"""CLI command modules.

This package contains:
- registry: Command descriptors and the ordered command catalogue
- dispatcher: Argument matching, usage banner and command execution
- config_commands: Local configuration commands (get-config, set-*)
- bridge: Pairing, whitelist and resource listing commands
- schedules: Schedule creation and deletion commands
"""
