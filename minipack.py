import argparse
import json
import os
import sys

from compiler import build_bundle, set_verbose
from packcore.config import CONFIG_FILE, load_config
from packcore.errors import BundleError
from packcore.graph import collect_dependencies

def log(message):
    """Log informational messages to stderr."""
    print(f"\033[92m\033[1mINFO:\033[0m {message}", file=sys.stderr)

def fail(message):
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)

def get_config(args):
    try:
        return load_config(args.config)
    except BundleError as e:
        fail(e)

def cmd_build(args):
    config = get_config(args)
    entry = args.entry or config.entry_path()
    output = args.output or config.output_path()

    if not os.path.exists(entry):
        fail(f"File '{entry}' not found.")

    try:
        bundle_string = build_bundle(entry, config)
    except (BundleError, FileNotFoundError) as e:
        fail(f"Bundling Failed:\n{e}")

    if output == "-":
        sys.stdout.write(bundle_string)
        return

    out_dir = os.path.dirname(output)
    if out_dir and not os.path.exists(out_dir):
        os.makedirs(out_dir)
    with open(output, 'w') as f:
        f.write(bundle_string)
    log(f"📦 Bundle written to {output}")

def cmd_graph(args):
    config = get_config(args)
    entry = args.entry or config.entry_path()
    try:
        dependencies = collect_dependencies(entry, config)
    except (BundleError, FileNotFoundError) as e:
        fail(e)

    for module_id, dependency in enumerate(dependencies):
        imports = [item.source.value for item in dependency.source.body if item.type == "ImportDeclaration"]
        line = f"[{module_id}] {os.path.relpath(dependency.name, config.root)}"
        if imports:
            line += f"  <- {', '.join(imports)}"
        print(line)

def cmd_init(args):
    log("Initializing project...")
    if not os.path.exists(CONFIG_FILE):
        with open(CONFIG_FILE, "w") as f:
            json.dump({"entry": "src/index.js", "output": "dist/bundle.js"}, f, indent=2)
    os.makedirs("src", exist_ok=True)
    with open(os.path.join("src", "index.js"), "w") as f:
        f.write("import { add } from './math';\n\nconsole.log(add(1, 2));\n\nexport { add };\n")
    with open(os.path.join("src", "math.js"), "w") as f:
        f.write("function add(a, b) {\n  return a + b;\n}\n\nexport { add };\n")
    log(f"Created {CONFIG_FILE}, src/index.js and src/math.js")


def main():
    parser = argparse.ArgumentParser(description="minipack CLI")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output (sent to stderr)")
    parser.add_argument("--config", help=f"Config file (default: {CONFIG_FILE})")
    subparsers = parser.add_subparsers(dest="command")

    build = subparsers.add_parser("build", help="Bundle an entry module")
    build.add_argument("entry", nargs="?", help="Entry module (default: from config)")
    build.add_argument("-o", "--output", help="Output file, '-' for stdout (default: from config)")

    graph = subparsers.add_parser("graph", help="Print the dependency list")
    graph.add_argument("entry", nargs="?", help="Entry module (default: from config)")

    subparsers.add_parser("init", help="Init project")

    args = parser.parse_args()
    set_verbose(args.verbose)

    if args.command == "build": cmd_build(args)
    elif args.command == "graph": cmd_graph(args)
    elif args.command == "init": cmd_init(args)
    else: parser.print_help()

if __name__ == "__main__":
    main()
