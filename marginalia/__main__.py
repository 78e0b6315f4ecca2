import sys

from django.core.management import execute_from_command_line

from marginalia.conf import configure_django


def main(argv=None):
    """Run the ``build`` command, e.g. ``marginalia notes/ site/``."""
    configure_django()
    argv = sys.argv[1:] if argv is None else list(argv)
    execute_from_command_line(["marginalia", "build", *argv])


if __name__ == "__main__":
    main()
