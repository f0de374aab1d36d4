import logging
from typing import Optional

from .core.collector import collect_enum_values
from .core.config import GenerationOptions
from .core.detector import check_existing_methods
from .core.error_context import error_context
from .core.formatting.go_formatter import GoFormatter
from .core.loader import GoSourceLoader
from .core.merger import ensure_import, merge_method
from .core.scanner import scan_annotated_types
from .core.synthesizer import build_string_method, build_values_method
from .core.utils.hashing import sha1_code
from .core.writer import render_source, write_source
from .models.declarations import SourceFile
from .models.report import EnumTypeReport, GenerationReport

logger = logging.getLogger(__name__)


class EnumGenerator:
    """
    Main entry point for enumgen.
    Runs the parse, scan, collect, detect, synthesize, merge and write stages
    for Go files with ``@enumGenerated`` types.
    """

    def __init__(self, options: Optional[GenerationOptions] = None):
        """
        Initialize the generator.

        Args:
            options: Per-run settings; defaults to the global configuration
        """
        self.options = options or GenerationOptions.from_config()
        self.loader = GoSourceLoader()
        self.formatter = GoFormatter()

    def generate(self, path: str, dry_run: bool = False) -> GenerationReport:
        """
        Generate accessors for every marked type in ``path`` and rewrite the file.

        Args:
            path: Go source file
            dry_run: Render the result without writing it

        Returns:
            Report of what was generated

        Raises:
            EnumGenError: On any failure; the run is aborted
        """
        with error_context('parse', path=path):
            source_file = self.loader.load(path, self.options.encoding)
        report = self._run(source_file)
        with error_context('render', path=path):
            output = render_source(source_file, self.formatter)
        report.output = output
        report.output_hash = sha1_code(output)
        if not dry_run:
            with error_context('write', path=path):
                write_source(path, output, atomic=self.options.atomic_write, encoding=self.options.encoding)
            report.written = True
        logger.info("Code generation completed successfully!")
        return report

    def generate_code(self, text: str) -> str:
        """Run the pipeline on ``text`` and return the new source without touching files."""
        with error_context('parse'):
            source_file = self.loader.parse(text)
        self._run(source_file)
        with error_context('render'):
            return render_source(source_file, self.formatter)

    def _run(self, source_file: SourceFile) -> GenerationReport:
        path = source_file.path
        with error_context('scan', path=path):
            annotated = scan_annotated_types(source_file, self.options.marker)
        report = GenerationReport(path=path, original_hash=sha1_code(source_file.text), output_hash='')
        for type_name, _declaration in annotated:
            report.enum_types.append(self._generate_for_type(source_file, type_name))
        if annotated and self.options.ensure_fmt_import:
            with error_context('merge', path=path):
                if ensure_import(source_file.declarations, 'fmt', source_file.newline):
                    report.imports_added.append('fmt')
        return report

    def _generate_for_type(self, source_file: SourceFile, type_name: str) -> EnumTypeReport:
        opts = self.options
        with error_context('collect', type_name=type_name):
            values = collect_enum_values(source_file, type_name, include_vars=opts.include_vars)
        with error_context('detect', type_name=type_name):
            existing = check_existing_methods(source_file, type_name, opts.values_method, opts.string_method)
        with error_context('synthesize', type_name=type_name):
            values_method = build_values_method(type_name, values, opts.receiver_name, opts.values_method)
            string_method = build_string_method(type_name, opts.receiver_name, opts.string_method, opts.format_verb)
        with error_context('merge', type_name=type_name):
            newline = source_file.newline
            values_action = merge_method(source_file.declarations, existing.has_values, type_name,
                                         values_method, newline)
            string_action = merge_method(source_file.declarations, existing.has_string, type_name,
                                         string_method, newline)
        return EnumTypeReport(type_name=type_name, values=values,
                              values_action=values_action, string_action=string_action)


def generate(path: str, *, dry_run: bool = False, options: Optional[GenerationOptions] = None) -> GenerationReport:
    """
    Generate ``Values`` and ``String`` methods for the marked types in ``path``.

    Args:
        path: Go source file, rewritten in place
        dry_run: Skip writing the file
        options: Per-run settings; defaults to the global configuration

    Returns:
        Report of the run
    """
    return EnumGenerator(options).generate(path, dry_run=dry_run)
