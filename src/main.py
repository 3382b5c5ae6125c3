#!/usr/bin/env python3
# src/main.py
import os
import sys
import logging
from datetime import datetime
from typing import List, Dict, Any, Optional

from colorama import init, Fore, Style

init(autoreset=True)
from .config_loader import load_configuration, setup_logging, DEFAULT_SETTINGS
from .file_io import read_input_file, write_output_file, sanitise_page_key
from .orchestrator import render_seo_head, RESULT_FIELDNAMES

OUTPUT_EXTENSIONS: Dict[str, str] = {"HTML": "html", "JSON": "json", "CSV": "csv"}

# ========================================
# Function: main
# ========================================
def main(argv: Optional[List[str]] = None) -> int:
    """
    Renders the SEO head of every page in the input file and writes the results.

    Usage: python -m src.main [config.yaml]
    """
    args = sys.argv[1:] if argv is None else argv
    config_path = args[0] if args else "config.yaml"

    # --- Load Configuration and Setup Logging ---
    settings = load_configuration(config_path)
    setup_logging(settings.get("log_level", DEFAULT_SETTINGS["log_level"]))
    logging.info("Script starting.")

    input_file = settings.get("input_file", DEFAULT_SETTINGS["input_file"])
    output_base_dir = settings.get("output_base_dir", DEFAULT_SETTINGS["output_base_dir"])
    output_subfolder = settings.get("output_subfolder", DEFAULT_SETTINGS["output_subfolder"])
    output_format = settings.get("output_format", DEFAULT_SETTINGS["output_format"])

    # --- Read Input File ---
    pages = read_input_file(input_file)
    if not pages:
        logging.critical("No page definitions found or provided. Exiting.")
        print(Fore.RED + "Error: No page definitions found.")
        return 1

    results: List[Dict[str, Any]] = []
    for idx, page in enumerate(pages, start=1):
        result = render_seo_head(page, settings)
        results.append(result)
        print(Style.BRIGHT + Fore.GREEN + f"Rendered page {idx}/{len(pages)}: {result['page-key']}" + Style.RESET_ALL)
        if result.get("Render error"):
            print(Fore.YELLOW + f"  Warning/Error noted: {result['Render error']}")
        else:
            print(Fore.CYAN + f"  {result['tag-count']} tags rendered.")

    # --- Save Output ---
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    first_key = sanitise_page_key(results[0]["page-key"])
    output_filename = f"seo_heads_{first_key}_{timestamp}.{OUTPUT_EXTENSIONS[output_format]}"
    output_path = os.path.join(output_base_dir, output_subfolder, output_filename)

    if not write_output_file(output_path, results, RESULT_FIELDNAMES, output_format):
        print(Fore.RED + Style.BRIGHT + "\nFailed to save rendered heads.")
        return 1

    print(Fore.CYAN + Style.BRIGHT + f"\nResults saved to: {output_path}")
    logging.info(f"Finished rendering {len(results)} pages.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
