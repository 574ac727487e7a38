__version__ = "0.1.0"


def _log_error(context, error):
    print(f"{context}: {error}")


class WolfbotCommands:
    """Entry point a host bot binds its slash-command events to."""

    def registration_payload(self):
        from Wolfbot.commands import commands_for_registration

        return commands_for_registration()

    def dispatch(self, command_name, command_args, interaction, **extra):
        """
        Run one command for one interaction.
        :return: the command's result dict
        """
        from Wolfbot.commands import run_command

        try:
            return run_command(
                command_name=command_name,
                command_args=command_args,
                interaction=interaction,
                **extra,
            )
        except ValueError as e:
            _log_error("Command dispatch failed", e)
            return {"ok": False, "command_name": command_name, "error_code": "unknown_command"}

    def wolf(self, query, interaction, **extra):
        return self.dispatch("wolf", {"query": query}, interaction, **extra)
