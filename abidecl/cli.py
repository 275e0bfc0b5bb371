import argparse
import json
import sys
from abidecl.abi_loader import DecodingFailed, contract_name, load_abi, load_contracts
from abidecl.printer import Printer

def load_file(filename):
    with open(filename) as f:
        data = json.load(f)
    if isinstance(data, dict) and 'contracts' in data:
        return load_contracts(data)
    return {filename: load_abi(data)}

def main(argv=None):
    parser = argparse.ArgumentParser(description='Ethereum contract ABI inspector')

    parser.add_argument('json_files', help="""
        Comma separated list of json files. Each file is either a plain ABI (json array of entries)
        or the output of the solidity compiler run with --combined-json abi.
        """)
    parser.add_argument('--contract', help="""
        Show only this contract, given either as file.sol:Name or just Name (combined json files only).
        """)
    parser.add_argument('--selectors', action='store_true', help="Show function selectors and event topics.")
    parser.add_argument('--no-color', action='store_true', help="Disable colored output.")

    args = parser.parse_args(argv)

    printer = Printer(selectors=args.selectors, color=not args.no_color)
    found = False
    for filename in args.json_files.split(","):
        try:
            contracts = load_file(filename)
        except (OSError, ValueError, DecodingFailed) as e:
            print(f"{filename}: {e}", file=sys.stderr)
            return 1
        for key, abi in contracts.items():
            if args.contract and args.contract not in [key, contract_name(key)]:
                continue
            found = True
            printer.print_abi(abi, key)
    if args.contract and not found:
        print(f"Contract {args.contract} is not found", file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
