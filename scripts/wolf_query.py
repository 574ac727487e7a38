import argparse
import json

from Wolfbot import WolfbotCommands
from Wolfbot.commands import ConsoleInteraction


def main():
    parser = argparse.ArgumentParser(description="Run /wolf from a terminal and save the strips locally.")
    parser.add_argument("query", nargs="+", help="text to send to WolframAlpha")
    parser.add_argument("--out", default="", help="folder for the PNG attachments")
    parser.add_argument("--max-files", type=int, default=None)
    parser.add_argument("--max-height", type=int, default=None)
    args = parser.parse_args()

    interaction = ConsoleInteraction(output_dir=args.out or None)
    res = WolfbotCommands().wolf(
        " ".join(args.query),
        interaction,
        max_files=args.max_files,
        max_height=args.max_height,
    )
    print(json.dumps(res, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
