"""Level events: static tile modifiers, timed dynamic events and their registry."""