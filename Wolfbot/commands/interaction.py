import os

from Wolfbot.config import config


class Interaction:
    """
    The slice of a host chat interaction a command needs.
    Hosts wrap their own interaction object in a subclass.
    """

    def defer_reply(self):
        raise NotImplementedError

    def edit_original(self, content, *, files=(), ephemeral=False):
        """
        Replace the deferred reply.
        :param files: sequence of (file name, PNG bytes) in display order
        """
        raise NotImplementedError


def _local_name(name):
    out = str(name or "attachment.png")
    for sep in (os.sep, os.altsep, "/", "\\"):
        if sep:
            out = out.replace(sep, "_")
    return out


class ConsoleInteraction(Interaction):
    """Prints replies and writes attachments to a local folder."""

    def __init__(self, output_dir=None):
        self.output_dir = os.path.abspath(str(output_dir or config.runtime_console_output_dir))
        self.deferred = False
        self.written = []

    def defer_reply(self):
        self.deferred = True
        print("Thinking...")

    def edit_original(self, content, *, files=(), ephemeral=False):
        prefix = "(only you can see this) " if ephemeral else ""
        print(prefix + str(content or ""))
        if not files:
            return
        os.makedirs(self.output_dir, exist_ok=True)
        for name, data in files:
            path = os.path.join(self.output_dir, _local_name(name))
            with open(path, "wb") as f:
                f.write(data)
            self.written.append(path)
            print(f"  attached {path}")
