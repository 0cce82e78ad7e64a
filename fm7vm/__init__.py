"""State files, palette and sub-CPU memory models, and key, joystick and settings tables for an FM-7 / FM77AV virtual machine."""

__version__ = "0.1.0"