"""
Command-line interface for document image extraction.

Provides the main entry point for extracting images from PDF and office
documents into ``extracted_images_<name>.zip`` archives.
"""

import argparse
import logging
import os
import sys

from doc_image_extraction.core.classifier import ContainerKind, classify
from doc_image_extraction_service.image_extractor_service import ImageExtractorService


def create_parser():
    """
    Create and return the argument parser for the CLI.

    Returns
    -------
    argparse.ArgumentParser
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog='extract-images',
        description='Extract images from PDF, DOCX, PPTX and XLSX documents',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Extract from a single document
  %(prog)s -i input.pdf -o ./output

  # Extract from several documents
  %(prog)s -i report.docx slides.pptx -o ./output

  # Extract every supported document of a directory
  %(prog)s -i /path/to/documents -o ./output

  # Using environment variables (Docker)
  export INPUT_PATH=/path/to/input.pdf
  export OUTPUT_PATH=/path/to/output
  %(prog)s --env
        """
    )

    parser.add_argument(
        '--input-path', '-i',
        nargs='+',
        help='Path to document(s) or directory containing documents'
    )

    parser.add_argument(
        '--output-path', '-o',
        type=str,
        default='.',
        help='Output directory for the image archives (default: current directory)'
    )

    parser.add_argument(
        '--env',
        action='store_true',
        help='Use environment variables (INPUT_PATH, OUTPUT_PATH)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    return parser


def collect_documents(input_paths):
    """
    Expand directories into the supported documents they contain.

    Parameters
    ----------
    input_paths : list
        File and directory paths.

    Returns
    -------
    list
        Document paths; files are kept as given, directory contents are
        sorted case-insensitively.
    """
    documents = []
    for path in input_paths:
        if os.path.isdir(path):
            names = sorted(os.listdir(path), key=str.lower)
            documents.extend(
                os.path.join(path, name) for name in names
                if classify(name) is not ContainerKind.UNSUPPORTED
            )
        else:
            documents.append(path)
    return documents


def run(input_paths, output_path):
    """
    Extract images from every document and report the outcomes.

    Returns
    -------
    int
        Exit status: 0 when no document failed, 1 otherwise.
    """
    service = ImageExtractorService()
    status = 0

    for document in collect_documents(input_paths):
        try:
            outcome = service.extract_images(document, output_path)
        except IOError as e:
            print(f"Error: {e}", file=sys.stderr)
            status = 1
            continue
        except Exception as e:
            print(f"Unexpected error: {document}: {e}", file=sys.stderr)
            status = 1
            continue

        if service.is_failure(outcome):
            print(f"{document}: {outcome.message}", file=sys.stderr)
            status = 1
        else:
            print(f"{document}: {outcome.message}")

    return status


def extract_with_env():
    """
    Extract images using environment variables.

    Supports Docker environment variables:
    - INPUT_PATH: Path to a document or directory (required)
    - OUTPUT_PATH: Output directory (default: /OUTPUT)
    """
    input_path = os.environ.get('INPUT_PATH')
    output_path = os.environ.get('OUTPUT_PATH', '/OUTPUT')

    if not input_path:
        print("Error: INPUT_PATH environment variable not set", file=sys.stderr)
        return 1

    if not os.path.exists(input_path):
        print(f"Error: document not found: {input_path}", file=sys.stderr)
        return 1

    os.makedirs(output_path, exist_ok=True)
    return run([input_path], output_path)


def main(argv=None):
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    if args.env:
        sys.exit(extract_with_env())

    if not args.input_path:
        parser.print_help()
        sys.exit(1)

    if not os.path.isdir(args.output_path):
        print(f"Error: Output {args.output_path} is not a directory", file=sys.stderr)
        sys.exit(1)

    sys.exit(run(args.input_path, args.output_path))


if __name__ == "__main__":
    main()
