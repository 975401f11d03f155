"""Configuration constants for the application."""

import os

# Optional log file (urwid owns the terminal, so logs go to a file)
LOG_FILE = os.getenv("ARIA_LISTBOX_LOG_FILE")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# urwid key name -> logical key handled by the listbox
KEY_BINDINGS = {
    'up': 'ArrowUp',
    'k': 'ArrowUp',
    'down': 'ArrowDown',
    'j': 'ArrowDown',
    'home': 'Home',
    'end': 'End',
}

# Keys handled by the application itself
QUIT_KEYS = ('q', 'Q')
SWITCH_FOCUS_KEYS = ('tab', 'shift tab')

# (name, foreground, background)
PALETTE = [
    ('header', 'white,bold', ''),
    ('option', '', ''),
    ('option selected', 'black', 'light gray'),
    ('status', 'light gray', ''),
    ('error', 'light red', ''),
]

# Item sets shown by the second listbox of the demo
FIRST_LIST_ITEMS = ('First', 'Second', 'Third')
SECOND_LIST_ITEMS = ('fourth', 'fifth', 'sixth')
