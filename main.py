import sys

from rich.pretty import pprint

from argsift import *

__prog__ = "argsift"


def main(args, /):
    parser = Parser()
    parser.hint_alias("v", "verbose")
    parser.hint_requires_value("o")
    parser.hint_requires_value("output")
    parser.hint_alias("o", "output")
    parser.hint_command("build")
    parser.hint_requires_value("j", ["build"])
    parser.hint_requires_value("jobs", ["build"])
    parser.hint_alias("j", "jobs", ["build"])
    parser.feed(args)

    try:
        parser.parse()
    except ParseError as fault:
        trigger(fault, shell=True, fancy=True)

    pprint(list(parser.drain()), expand_all=True)


if __name__ == '__main__':
    main(sys.argv[1:])
