"""
The interactive phone book shell.

prompts holds the console wrapper and the small input loops every command is
built from; interpreter holds the read-eval loop and the command handlers.
"""
