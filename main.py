from config import Config
from vmem import VirtualMemorySimulator, TranslationError
import argparse
import os
import sys

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Translate logical addresses through a TLB and demand-paged page table"
    )
    parser.add_argument(
        "backing_store",
        help="Path to the backing store file (BACKING_STORE.bin)",
    )
    parser.add_argument(
        "addresses",
        help="Path to the file of logical addresses, one decimal integer per line",
    )
    parser.add_argument(
        "-c", "--config",
        default=None,
        help="Optional geometry config file (default: 256 pages of 256 bytes, 256 frames, 16 TLB entries)",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-v", "--verbose",
        dest="verbose",
        action="store_true",
        help="Print the configuration and extended statistics",
    )
    group.add_argument(
        "-q", "--quiet",
        dest="verbose",
        action="store_false",
        help="Only print translations and the summary (default)",
    )
    parser.set_defaults(verbose=False)
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)

    # validation
    if args.config is not None and not os.path.exists(args.config):
        print(f"error: config file not found: {args.config}", file=sys.stderr)
        return 2
    for label, path in (("backing store", args.backing_store), ("addresses", args.addresses)):
        if not os.path.isfile(path):
            print(f"error: could not open {label} file: {path}", file=sys.stderr)
            return 2

    try:
        mem_sim_config = Config.from_config_file(args.config) if args.config else Config()
    except OSError as exc:
        print(f"error: could not open config file: {args.config}: {exc.strerror}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"error: invalid config file {args.config}: {exc}", file=sys.stderr)
        return 2

    if args.verbose:
        print(mem_sim_config)
    simulator = VirtualMemorySimulator(mem_sim_config)
    try:
        simulator.simulate(args.backing_store, args.addresses, verbose=args.verbose)
    except OSError as exc:
        print(f"error: could not open {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    except TranslationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0

def _entry():
    sys.exit(main())


if __name__ == '__main__':
    _entry()
