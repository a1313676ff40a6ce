import argparse
import logging
import sys

import abstk
from abstk.core import config

# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    CYAN = "\033[36m"

    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_CYAN = "\033[96m"
    BRIGHT_WHITE = "\033[97m"

DEMO_NAMES = [
    "label",
    "buttons",
    "combobox",
    "image",
    "text_input",
    "textbox",
    "checklist",
    "radiolist",
    "list",
    "message",
    "wizard",
]

def print_separator(char="─", width=60):
    """Print a horizontal separator line"""
    print(f"{Colors.DIM}{char * width}{Colors.RESET}")

def print_info(label: str, value: str, indent: int = 0):
    """Print formatted info line"""
    spaces = "  " * indent
    print(f"{spaces}{Colors.CYAN}{label}:{Colors.RESET} {Colors.BRIGHT_WHITE}{value}{Colors.RESET}")

def print_success(message: str):
    print(f"{Colors.BRIGHT_GREEN}✓{Colors.RESET} {message}")

def print_warning(message: str):
    print(f"{Colors.BRIGHT_YELLOW}!{Colors.RESET} {message}")

def print_error(message: str):
    print(f"{Colors.BRIGHT_RED}✗{Colors.RESET} {message}", file=sys.stderr)

def print_header(text: str):
    print(f"\n{Colors.BOLD}{Colors.BRIGHT_CYAN}{text}{Colors.RESET}")
    print_separator()

def print_banner():
    print(f"{Colors.BOLD}{Colors.BRIGHT_CYAN}╔═══════════════════════════════════╗")
    print(f"║             A B S T K             ║")
    print(f"╚═══════════════════════════════════╝{Colors.RESET}")
    print(f"{Colors.DIM}Declarative screens and wizards for GTK4{Colors.RESET}")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abstk",
        description="AbsTK - Declarative screens and wizards on top of GTK4",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Print extra debug info")
    parser.add_argument("--no-banner", action="store_true", help="Disable banner output")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser(
        "tldr",
        help="Quick project overview (Too Long; Didn't Read)",
        description="Display a quick overview of what AbsTK is and what it does."
    )

    demo_cmd = sub.add_parser(
        "demo",
        help="Run a sample screen or wizard",
        description="""Run one of the bundled samples.

Every sample prints the arguments its callbacks receive.""",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    demo_cmd.add_argument("name", choices=DEMO_NAMES, metavar="NAME",
                          help=f"Sample to run ({', '.join(DEMO_NAMES)})")
    demo_cmd.add_argument("--image", type=str, default=None,
                          help="Image file used by the 'image' sample")
    demo_cmd.add_argument("--mode", type=str, default=None,
                          help=f"Frontend mode (default: ${config.MODE_ENV} or {config.DEFAULT_MODE})")

    sub.add_parser(
        "mode",
        help="Show the resolved frontend mode and config paths",
        description="Display the frontend mode and where optional configuration is read from."
    )

    return parser

def parse_arguments(argv=None):
    return build_parser().parse_args(argv)

def print_tldr():
    print_header("AbsTK in a nutshell")
    print(f"{Colors.CYAN}▸{Colors.RESET} Build a {Colors.BRIGHT_WHITE}Screen{Colors.RESET}, add widgets by id, call run()")
    print(f"{Colors.CYAN}▸{Colors.RESET} Put several screens in a {Colors.BRIGHT_WHITE}Wizard{Colors.RESET} to show them as pages")
    print(f"{Colors.CYAN}▸{Colors.RESET} Read and change widgets with get_value / set_value / set_enabled")
    print()
    print_info("Toolkit", "GTK4 + libadwaita (PyGObject)")
    print_info("Samples", "abstk demo <name>")
    print()

def main(argv=None):
    args = parse_arguments(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s:%(name)s:%(message)s")

    if not args.no_banner and args.command == "tldr":
        print_banner()

    try:
        if args.command == "tldr":
            print_tldr()

        elif args.command == "mode":
            print_header("Configuration")
            print_info("Mode", config.get_mode())
            print_info("Config directory", str(config.CONFIG_DIR))
            print_info("Stylesheet", f"{config.STYLE_FILE} ({'found' if config.STYLE_FILE.exists() else 'not found'})")
            print()

        elif args.command == "demo":
            abstk.set_mode(args.mode)
            from abstk.cli.demos import DEMOS
            DEMOS[args.name](image=args.image)
            print_success(f"Sample '{args.name}' closed")

    except KeyboardInterrupt:
        print()
        print_warning("Operation cancelled by user")
        raise SystemExit(130)
    except RuntimeError as e:
        if not gtk_unavailable(e):
            fail(e, args.verbose)
        print_error(f"Error: {e}")
        print("Install: python-gobject gtk4 libadwaita", file=sys.stderr)
        raise SystemExit(1)
    except Exception as e:
        fail(e, args.verbose)

    return 0

def gtk_unavailable(error: RuntimeError) -> bool:
    """True for the error the gui modules raise when gi cannot load GTK4/libadwaita."""
    return isinstance(error.__cause__, (ImportError, ValueError))

def fail(e: Exception, verbose: bool):
    """Report an unexpected error and exit with status 1."""
    print()
    print_error(f"Error: {e}")
    if verbose:
        import traceback
        print()
        print(f"{Colors.DIM}{traceback.format_exc()}{Colors.RESET}")
    raise SystemExit(1)

if __name__ == "__main__":
    sys.exit(main())
