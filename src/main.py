import json
import sys
import time
import logging
from pathlib import Path
from typing import Any, Dict, List

from src.analyzer import WalkLimits
from src.analyzer.constants import WalkDefaults
from src.analyzer.errors import AnalysisError
from src.project import dump_project, write_project
from src.services import AnalysisService, ProjectWatcher


# Configure logging
logger = logging.getLogger(__name__)

MODES = ("full", "meta", "info", "watch")


def setup_logging(log_file: Path = None, level: str = "INFO"):
    """
    Configure logging to both file and console.

    Args:
        log_file: Path to log file (optional)
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    # Create formatters
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    simple_formatter = logging.Formatter(
        '%(levelname)s: %(message)s'
    )

    # Root logger configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    root_logger.handlers = []

    # Console handler on stderr so stdout stays valid JSON
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    # File handler (detailed format)
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")

    return root_logger


def print_usage():
    print("Usage: python -m src.main <path-to-json-or-sb2> [OPTIONS]", file=sys.stderr)
    print("\nModes:", file=sys.stderr)
    print("  --mode=full       - Output project with _meta attached (default)", file=sys.stderr)
    print("  --mode=meta       - Output only the _meta object", file=sys.stderr)
    print("  --mode=info       - Show compact project summary", file=sys.stderr)
    print("  --mode=watch      - Re-analyze whenever the file is saved", file=sys.stderr)
    print("\nOutput Options:", file=sys.stderr)
    print("  --output=PATH     - Write JSON to PATH instead of stdout", file=sys.stderr)
    print("  --indent=N        - JSON indentation (default: 2)", file=sys.stderr)
    print("\nAnalysis Options:", file=sys.stderr)
    print(f"  --max-depth=N     - Script nesting limit (default: {WalkDefaults.MAX_DEPTH})", file=sys.stderr)
    print(f"  --max-nodes=N     - Script size limit (default: {WalkDefaults.MAX_NODES})", file=sys.stderr)
    print("\nLogging Options:", file=sys.stderr)
    print("  --log-file=PATH   - Log to file (default: stderr only)", file=sys.stderr)
    print("  --log-level=LEVEL - Logging level: DEBUG, INFO, WARNING, ERROR (default: INFO)", file=sys.stderr)


def parse_args(argv: List[str]) -> Dict[str, Any]:
    """
    Parse command line arguments (excluding the program name).

    Raises:
        ValueError: If no path is given or an option is malformed
    """
    if not argv:
        raise ValueError("Missing project path")

    options = {
        "path": Path(argv[0]),
        "mode": "full",
        "output": None,
        "indent": 2,
        "max_depth": WalkDefaults.MAX_DEPTH,
        "max_nodes": WalkDefaults.MAX_NODES,
        "log_file": None,
        "log_level": "INFO",
    }

    for arg in argv[1:]:
        if arg.startswith("--mode="):
            options["mode"] = arg.split("=", 1)[1]
        elif arg.startswith("--output="):
            options["output"] = Path(arg.split("=", 1)[1])
        elif arg.startswith("--indent="):
            options["indent"] = int(arg.split("=", 1)[1])
        elif arg.startswith("--max-depth="):
            options["max_depth"] = int(arg.split("=", 1)[1])
        elif arg.startswith("--max-nodes="):
            options["max_nodes"] = int(arg.split("=", 1)[1])
        elif arg.startswith("--log-file="):
            options["log_file"] = Path(arg.split("=", 1)[1])
        elif arg.startswith("--log-level="):
            options["log_level"] = arg.split("=", 1)[1]
        else:
            raise ValueError(f"Unknown option: {arg}")

    if options["mode"] not in MODES:
        raise ValueError(f"Unknown mode: {options['mode']}")

    return options


def emit(data: Any, output: Path = None, indent: int = 2):
    """Write JSON to the output file, or print it."""
    if output:
        write_project(data, output, indent=indent)
    else:
        print(dump_project(data, indent=indent))


def run_once(service: AnalysisService, options: Dict[str, Any]) -> int:
    """Analyze the project once and emit the result for the selected mode."""
    result = service.analyze_file(options["path"])
    if result["status"] != "success":
        print(f"Analysis failed: {result['error']}", file=sys.stderr)
        return 1

    mode = options["mode"]
    if mode == "info":
        print(json.dumps(service.get_project_info(), indent=options["indent"]))
    elif mode == "meta":
        emit(service.get_meta(), options["output"], options["indent"])
    else:
        emit(service.current_project, options["output"], options["indent"])
    return 0


def run_watch(service: AnalysisService, options: Dict[str, Any]) -> int:
    """Analyze the project now and again on every save until interrupted."""
    path = options["path"]

    def on_change(file_path: Path):
        logger.info(f"[File Watch] Detected change in {file_path.name}")
        try:
            result = service.analyze_file(file_path)
        except (AnalysisError, OSError) as e:
            logger.error(f"[File Watch] Error reloading project: {e}")
            return

        if result["status"] == "success":
            info = result["summary"]
            logger.info(
                f"[File Watch] {info['sprites']} sprites, "
                f"{info['blocks']} blocks ({info['unique_blocks']} unique)"
            )
            if options["output"]:
                write_project(service.current_project, options["output"], indent=options["indent"])

    on_change(path)

    watcher = ProjectWatcher(on_change).watch(path)
    with watcher:
        logger.info("Watching for changes. Press Ctrl+C to stop.")
        try:
            while watcher.is_running():
                time.sleep(1)
        except KeyboardInterrupt:
            logger.info("Shutting down...")
    return 0


def main():
    try:
        options = parse_args(sys.argv[1:])
    except ValueError as e:
        print(f"Error: {e}\n", file=sys.stderr)
        print_usage()
        sys.exit(1)

    # Setup logging
    setup_logging(log_file=options["log_file"], level=options["log_level"])

    limits = WalkLimits(max_depth=options["max_depth"], max_nodes=options["max_nodes"])
    service = AnalysisService(limits=limits)

    run = run_watch if options["mode"] == "watch" else run_once

    try:
        sys.exit(run(service, options))
    except (AnalysisError, OSError) as e:
        logger.error(f"Could not analyze {options['path']}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
