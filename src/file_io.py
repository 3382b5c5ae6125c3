# src/file_io.py
import os
import csv
import json
import logging
from typing import List, Dict, Any
import yaml
from colorama import Fore, Style

# ========================================
# Function: read_input_file
# Description: Reads page definitions from a YAML file.
# ========================================
def read_input_file(input_file_path: str) -> List[Dict[str, Any]]:
    """
    Reads page definitions from a YAML file.
    If the initial path is invalid, prompts the user for a correct path.
    The file holds either a top-level list of pages or a mapping with a
    'pages' list. Entries that are not mappings are skipped.

    Args:
        input_file_path: The initial path to the input file.

    Returns:
        A list of page definition dicts. Returns empty list on critical error or if user enters no path.
    """
    current_path = input_file_path
    while not os.path.exists(current_path):
        logging.warning(f"Input file specified not found: {current_path}")
        print(Fore.YELLOW + f"Input file specified ('{current_path}') not found.")
        try:
            new_path = input(Fore.CYAN + "Please enter the correct path to the page definitions file (or press Enter to exit): " + Style.RESET_ALL).strip()
            if not new_path:
                print(Fore.RED + "No path entered. Exiting.")
                return []
            current_path = new_path
        except EOFError:
            print(Fore.RED + "\nInput stream closed. Exiting.")
            return []

    logging.info(f"Attempting to read page definitions from '{current_path}'.")
    try:
        with open(current_path, "r", encoding="utf-8") as file:
            document = yaml.safe_load(file)
    except IOError as e:
        logging.error(f"Error reading input file {current_path}: {e}")
        print(Fore.RED + f"Error reading file: {e}")
        return []
    except yaml.YAMLError as e:
        logging.error(f"Error parsing YAML in {current_path}: {e}")
        print(Fore.RED + f"Error parsing page definitions: {e}")
        return []

    entries = document.get("pages", []) if isinstance(document, dict) else document
    if not isinstance(entries, list):
        logging.warning(f"No list of pages found in {current_path}.")
        entries = []

    pages: List[Dict[str, Any]] = []
    for i, entry in enumerate(entries):
        if isinstance(entry, dict):
            pages.append(entry)
        else:
            logging.warning(f"Skipping page entry {i + 1}: expected a mapping, got {type(entry).__name__}")

    logging.info(f"Read {len(pages)} page definitions from {current_path}")
    if not pages:
        print(Fore.YELLOW + f"Warning: No page definitions found in the input file: {current_path}")
    return pages

# ========================================
# Function: sanitise_page_key
# ========================================
def sanitise_page_key(page_key: str) -> str:
    """
    Turns a page key (often a URL) into a filename-safe token.

    e.g. 'https://www.example.com/blog/' -> 'www_example_com_blog'
    """
    if not isinstance(page_key, str) or not page_key.strip(): return "unknown_page"
    text = page_key.strip()
    for prefix in ("https://", "http://"):
        if text.lower().startswith(prefix):
            text = text[len(prefix):]
            break
    sanitised = "".join(c if c.isalnum() or c in ['_', '-'] else "_" for c in text)
    while "__" in sanitised:
        sanitised = sanitised.replace("__", "_")
    sanitised = sanitised.strip("_")
    return sanitised if sanitised else "unknown_page"

# ========================================
# Function: write_output_file
# ========================================
def write_output_file(
    file_path: str,
    data: List[Dict[str, Any]],
    fieldnames: List[str],
    output_format: str
    ) -> bool:
    """
    Writes rendered page results in HTML, JSON or CSV format.
    Creates the output directory if it doesn't exist.

    HTML output concatenates each page's 'head-html', preceded by a comment
    naming the page.

    Args:
        file_path: The full path to the output file.
        data: Render results, one dict per page.
        fieldnames: Column/key order for CSV output.
        output_format: "HTML", "JSON" or "CSV" (case-insensitive).

    Returns:
        True if writing was successful, False otherwise.
    """
    if not data:
        logging.warning("No data provided to write to output file.")
        print(Fore.YELLOW + "No pages were rendered to write to the output file.")
        return False

    try:
        output_dir = os.path.dirname(file_path)
        if output_dir and not os.path.exists(output_dir):
            logging.info(f"Creating output directory: {output_dir}")
            os.makedirs(output_dir, exist_ok=True)

        normalized_format = output_format.upper()
        logging.info(f"Attempting to write {len(data)} records to {file_path} in {normalized_format} format.")

        if normalized_format == "HTML":
            with open(file_path, "w", encoding="utf-8") as outfile:
                for row in data:
                    # '--' is not allowed inside an HTML comment
                    page_key = str(row.get("page-key", "")).replace("--", "-")
                    outfile.write(f"<!-- page: {page_key} -->\n")
                    outfile.write(f"{row.get('head-html', '')}\n\n")
            logging.info(f"Successfully wrote {len(data)} page heads to HTML: {file_path}")
            return True

        elif normalized_format == "CSV":
            with open(file_path, "w", newline="", encoding="utf-8") as outfile:
                writer = csv.DictWriter(outfile, fieldnames=fieldnames, extrasaction='ignore', restval='')
                writer.writeheader()
                writer.writerows(data)
            logging.info(f"Successfully wrote {len(data)} rows to CSV: {file_path}")
            return True

        elif normalized_format == "JSON":
            with open(file_path, "w", encoding="utf-8") as outfile:
                json.dump(data, outfile, indent=4, ensure_ascii=False)
            logging.info(f"Successfully wrote {len(data)} records to JSON: {file_path}")
            return True

        else:
            logging.error(f"Unsupported output format requested: {output_format}")
            print(Fore.RED + f"Error: Unsupported output format specified '{output_format}'. Please use HTML, JSON or CSV.")
            return False

    except IOError as e:
        logging.error(f"Error writing to output file {file_path}: {e}", exc_info=True)
        print(Fore.RED + f"Error writing to file {file_path}: {e}")
        return False
