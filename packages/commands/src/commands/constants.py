"""Constants for the command system."""

# Ray namespace for all actors
NAMESPACE: str = "commands"

# Distributed command manager actor
COMMAND_MANAGER_ACTOR: str = "command_manager"

# Default sender-visible texts
PERMISSION_ERROR: str = "Sorry, you do not have permission for this command."
INVALID_COMMAND: str = "Invalid command entered! Type /help for help!"
ERROR_OCCURRED: str = "An error occurred! Please contact the server administrators."
UNSUPPORTED_SENDER_ERROR: str = ""

# Prefix that marks a chat line as a command
COMMAND_PREFIX: str = "/"
