"""
Command Line Interface for the package inventory extractor
"""

import click
import logging
from pathlib import Path

from .core.extractor import PackageExtractor
from .exceptions import DtsxInventoryError
from .generators.output_writer import OutputWriter, OUTPUT_FORMATS
from .generators.statistics_generator import StatisticsGenerator, REPORT_FORMATS
from .models import ALL, ExtractionMode
from .validators.filter_validator import filter_vocabulary


logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool):
    """Diagnostics go to stderr, records to stdout"""
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=log_level, format='%(asctime)s - %(levelname)s - %(message)s')


def _echo_summary(extractor: PackageExtractor):
    summary = extractor.summary
    click.echo(
        f"Files seen: {summary.files_seen}, processed: {summary.files_processed}, "
        f"skipped: {summary.files_skipped}, failed: {summary.files_failed}, "
        f"records: {summary.records_emitted}",
        err=True
    )


def _run_extraction(extractor: PackageExtractor, paths, output_format, output, verbose):
    writer = OutputWriter(output_format, extractor.mode)

    try:
        records = extractor.extract(paths)
        with click.open_file(output or '-', 'w', encoding='utf-8') as stream:
            writer.write(records, stream)
    except DtsxInventoryError as e:
        logger.error(f"Extraction failed: {str(e)}")
        raise click.ClickException(str(e))

    if verbose:
        _echo_summary(extractor)


@click.command()
@click.argument('paths', nargs=-1, required=True,
                type=click.Path(exists=True, path_type=Path))
@click.option('--category', '-c', 'categories', multiple=True, default=[ALL],
              type=click.Choice(filter_vocabulary(ExtractionMode.CONTENT)),
              help='Category to extract; repeat for several (default: All)')
@click.option('--recurse', '-r', is_flag=True,
              help='Descend into subdirectories of directory arguments')
@click.option('--strict', is_flag=True,
              help='Stop at the first malformed package instead of skipping it')
@click.option('--output-format', '-f', type=click.Choice(OUTPUT_FORMATS), default='table',
              help='Output format for extracted records')
@click.option('--output', '-o', type=click.Path(dir_okay=False, writable=True),
              help='Write records to this file instead of stdout')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose logging')
def content(paths, categories, recurse, strict, output_format, output, verbose):
    """
    List tasks, variables, configurations, connections and data-flow
    components of SSIS packages.
    """
    _setup_logging(verbose)

    try:
        extractor = PackageExtractor(
            mode=ExtractionMode.CONTENT,
            filters=categories,
            strict=strict,
            recurse=recurse
        )
    except DtsxInventoryError as e:
        raise click.ClickException(str(e))

    _run_extraction(extractor, paths, output_format, output, verbose)


@click.command()
@click.argument('paths', nargs=-1, required=True,
                type=click.Path(exists=True, path_type=Path))
@click.option('--type', '-t', 'component_types', multiple=True, default=[ALL],
              type=click.Choice(filter_vocabulary(ExtractionMode.SQL)),
              help='Component type to extract SQL from; repeat for several (default: All)')
@click.option('--search', '-s',
              help='Only keep statements matching this case-insensitive regular expression')
@click.option('--literal', is_flag=True,
              help='Match --search as a plain substring')
@click.option('--recurse', '-r', is_flag=True,
              help='Descend into subdirectories of directory arguments')
@click.option('--strict', is_flag=True,
              help='Stop at the first malformed package instead of skipping it')
@click.option('--output-format', '-f', type=click.Choice(OUTPUT_FORMATS), default='table',
              help='Output format for extracted records')
@click.option('--output', '-o', type=click.Path(dir_okay=False, writable=True),
              help='Write records to this file instead of stdout')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose logging')
def sql(paths, component_types, search, literal, recurse, strict, output_format, output, verbose):
    """
    Extract SQL statements from Execute SQL Tasks, OLE DB components,
    lookups and variable expressions.
    """
    _setup_logging(verbose)

    try:
        extractor = PackageExtractor(
            mode=ExtractionMode.SQL,
            filters=component_types,
            strict=strict,
            recurse=recurse,
            search=search,
            literal=literal
        )
    except DtsxInventoryError as e:
        raise click.ClickException(str(e))

    _run_extraction(extractor, paths, output_format, output, verbose)


@click.command()
@click.argument('paths', nargs=-1, required=True,
                type=click.Path(exists=True, path_type=Path))
@click.option('--recurse', '-r', is_flag=True,
              help='Descend into subdirectories of directory arguments')
@click.option('--strict', is_flag=True,
              help='Stop at the first malformed package instead of skipping it')
@click.option('--report-format', type=click.Choice(REPORT_FORMATS), default='text',
              help='Format of the statistics report')
@click.option('--output', '-o', type=click.Path(dir_okay=False, writable=True),
              help='Write the report to this file instead of stdout')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose logging')
def stats(paths, recurse, strict, report_format, output, verbose):
    """Count component usage across a set of SSIS packages."""
    _setup_logging(verbose)

    extractor = PackageExtractor(mode=ExtractionMode.CONTENT, strict=strict, recurse=recurse)
    generator = StatisticsGenerator()

    try:
        records = list(extractor.extract(paths))
    except DtsxInventoryError as e:
        logger.error(f"Extraction failed: {str(e)}")
        raise click.ClickException(str(e))

    statistics = generator.generate_statistics(records, extractor.summary)
    report = generator.render_report(statistics, report_format)

    if output:
        Path(output).write_text(report, encoding='utf-8')
        click.echo(f"Statistics report saved to: {output}", err=True)
    else:
        click.echo(report)


@click.group()
def cli():
    """SSIS package inventory CLI"""
    pass


cli.add_command(content)
cli.add_command(sql)
cli.add_command(stats)


if __name__ == '__main__':
    cli()
