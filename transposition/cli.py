import sys
import argparse

from transposition import __version__
from transposition.armor import ArmorError, DEFAULT_ECC_SYMBOLS, is_protected, protect, recover
from transposition.codec import TranspositionCodec
from transposition.key import InvalidKeyError, validate
from transposition.log import log_info, log_warn, set_verbose
from transposition.textio import join_lines, read_text, write_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transposition",
        description=TranspositionCodec.description,
        epilog="Example: transposition -e 3120 plain.txt cipher.txt",
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Main action group
    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encrypt", action="store_true", help="Encrypt mode")
    action_group.add_argument("-d", "--decrypt", action="store_true", help="Decrypt mode")

    parser.add_argument("key", metavar="KEY",
                        help="Permutation of the digits 0..n-1, fewer than 10 digits (e.g. 3120)")

    # I/O options
    parser.add_argument("input", metavar="INPUT", nargs="?",
                        help="Input file path (lines are joined with single spaces)")
    parser.add_argument("output", metavar="OUTPUT", nargs="?", help="Output file path")
    parser.add_argument("-t", "--text", help="Direct text input (used verbatim)")
    parser.add_argument("-o", "--output-file", dest="output_file", metavar="PATH",
                        help="Output file path (alternative to OUTPUT)")

    # ECC options
    parser.add_argument("--ecc-symbols", type=int, default=DEFAULT_ECC_SYMBOLS, metavar="N",
                        help="Reed-Solomon ECC symbols added to encrypted output (default: off).\n"
                             "Armored ciphertext is detected automatically on decrypt.")

    # Verbose output
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")
    return parser


def read_source(args) -> str:
    if args.text is not None:
        return args.text
    if args.input:
        try:
            return read_text(args.input)
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.input}' not found.")
        except (OSError, UnicodeDecodeError) as e:
            sys.exit(f"Error reading file: {e}")
    if sys.stdin.isatty():
        print("[CIPHER] Paste input below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:", file=sys.stderr)
    try:
        return join_lines(sys.stdin.read())
    except UnicodeDecodeError as e:
        sys.exit(f"Error reading input: {e}")
    except KeyboardInterrupt:
        sys.exit(0)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)

    if args.text is not None and args.input:
        parser.error("INPUT and -t/--text cannot be combined; use -o for the output file")
    if args.output and args.output_file:
        parser.error("OUTPUT and -o/--output-file cannot be combined")
    output_path = args.output or args.output_file

    # 1. CHECK KEY (before touching any input)
    try:
        key = validate(args.key)
    except InvalidKeyError as e:
        sys.exit(f"Error with cipher key value: {e}")
    log_info("Key is OK.")

    # 2. READ INPUT
    source_text = read_source(args)
    codec = TranspositionCodec()

    # 3. TRANSFORM
    if args.encrypt:
        result = codec.encrypt(source_text, key)
        try:
            result = protect(result, args.ecc_symbols)
        except ArmorError as e:
            sys.exit(f"Encrypt Error: {e}")
        action = "encrypted"
    else:
        if args.ecc_symbols != DEFAULT_ECC_SYMBOLS:
            log_warn("--ecc-symbols is ignored when decrypting; armor is detected automatically.")
        ciphertext = source_text
        if is_protected(source_text):
            try:
                ciphertext, errors = recover(source_text)
                log_info(f"Armored ciphertext detected ({errors} error(s) corrected).")
            except ArmorError as e:
                # Braille ciphertext can look like armor by chance
                log_warn(f"Input looks armored but could not be recovered ({e}); decrypting it as-is.")
        result = codec.decrypt(ciphertext, key)
        action = "decrypted"

    # 4. WRITE OUTPUT
    if output_path:
        try:
            write_text(output_path, result)
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
        print(f"Text has been {action} and written to {output_path}")
    else:
        print(result)
    return 0
