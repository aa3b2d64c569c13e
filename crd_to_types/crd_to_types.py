import json
import logging
from pathlib import Path

import click

from .pipeline import (
    CodeGeneratorConfig,
    NameCollisionError,
    OutputConfig,
    OutputMode,
    OutputWriteError,
    PipelineGenerator,
    SchemaLoadError,
    load_document,
)


@click.command()
@click.version_option(package_name="crd_to_types")
@click.option("--in", "-i", "in_path", required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="OpenAPI file (JSON or YAML)")
@click.option("--out", "-o", "out_dir", default=None, type=click.Path(file_okay=False, path_type=Path), help="Output directory (default: no output)")
@click.option("--json", "-j", "dump_json", is_flag=True, default=False, help="Dump reduced types as JSON for debugging")
@click.option("--metadata-type", "--metadataType", "metadata_type", default=None, type=str, help="Type used for root metadata fields without properties")
@click.option("--fallback-type", "--fallbackType", "fallback_type", default=None, type=str, help="Type used for fields without a usable type")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="JSON configuration file")
@click.option("--strict-names", is_flag=True, default=False, help="Fail when two schemas produce the same type name")
@click.option("--no-overwrite", is_flag=True, default=False, help="Refuse to replace existing output files")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def crdtotypes(in_path, out_dir, dump_json, metadata_type, fallback_type, config, strict_names, no_overwrite, verbose):
    """Extract TypeScript interfaces from an OpenAPI file."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        try:
            with open(config) as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise click.ClickException(f"Failed to read config file {config}: {exc}") from exc
        if not isinstance(config_data, dict):
            raise click.ClickException(f"Config file {config} must contain a JSON object")
        config = CodeGeneratorConfig.from_dict(config_data)
    else:
        config = CodeGeneratorConfig()

    # CLI options override the config file
    if metadata_type:
        config.metadata_type = metadata_type
    if fallback_type:
        config.fallback_type = fallback_type
    if strict_names:
        config.strict_names = True

    output_config = OutputConfig(mode=OutputMode.ERROR_IF_EXISTS if no_overwrite else OutputMode.FORCE)

    try:
        document = load_document(in_path)
        codegen = PipelineGenerator(document, config, output_config)
        result = codegen.run()

        if dump_json:
            click.echo(json.dumps(result.to_dict(), default=str))

        if out_dir is not None:
            codegen.write(out_dir, result)
            click.echo(f"Generated {len(result.reduced)} types in {out_dir}", err=dump_json)
    except (SchemaLoadError, NameCollisionError, OutputWriteError) as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    crdtotypes()
