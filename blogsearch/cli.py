"""Blog search CLI - index inspection, queries and content maintenance."""

from __future__ import annotations

import json
from pathlib import Path

import click

from blogsearch.config import AppConfig, load_config, load_env_overrides, resolve_path
from blogsearch.errors import BlogSearchError
from blogsearch.logging_setup import configure_logging

config_option = click.option(
    "--config",
    "-c",
    default=None,
    envvar="BLOGSEARCH_CONFIG",
    help="Configuration file path (defaults when omitted)",
)


def _load(config: str | None) -> AppConfig:
    cfg = load_env_overrides(load_config(config))
    configure_logging(cfg.logging)
    return cfg


def _engine(cfg: AppConfig, show_progress: bool = False):
    from blogsearch.search.engine import SearchEngine

    return SearchEngine.from_config(cfg, show_progress=show_progress)


def _blog_root(cfg: AppConfig) -> Path:
    return resolve_path(cfg.content.root) / cfg.content.blog_dir


@click.group()
@click.version_option(package_name="blogsearch")
def cli():
    """Blog search CLI - course search index and content maintenance."""
    pass


@cli.command()
@config_option
def validate(config: str | None):
    """Validate configuration file."""
    try:
        cfg = _load(config)
    except (OSError, BlogSearchError) as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        raise click.Abort()

    click.echo("✓ Configuration is valid")
    click.echo(f"  Content root: {cfg.content.root}")
    click.echo(f"  File extensions: {cfg.content.file_extensions}")
    click.echo(f"  Search limit: {cfg.search.default_limit} (max {cfg.search.max_limit})")
    click.echo(f"  Build timeout: {cfg.index.build_timeout_seconds}s")


@cli.command()
@config_option
@click.option("--progress/--no-progress", default=False, help="Show a progress bar")
def build(config: str | None, progress: bool):
    """Build the index once and print statistics."""
    try:
        cfg = _load(config)
        engine = _engine(cfg, show_progress=progress)
        documents = engine.store.get()
    except (OSError, BlogSearchError) as e:
        click.echo(f"✗ Build failed: {e}", err=True)
        raise click.Abort()

    stats = engine.store.last_build_stats or {}
    click.echo(f"✓ Indexed: {stats.get('indexed', len(documents))}/{stats.get('total', len(documents))} documents")
    click.echo(f"  Skipped: {stats.get('skipped', 0)}")
    for err in stats.get("errors", [])[:5]:
        click.echo(f"    - {err['doc_id']}: {err['error']}")
    click.echo(f"  Elapsed: {stats.get('elapsed_ms', 0)}ms")


@cli.command()
@config_option
@click.argument("query")
@click.option("--limit", "-n", type=int, default=None, help="Maximum results")
@click.option("--lang", type=click.Choice(["en", "fr"]), default=None, help="Language filter")
@click.option("--json", "as_json", is_flag=True, help="Print JSON")
def search(config: str | None, query: str, limit: int | None, lang: str | None, as_json: bool):
    """Search courses for QUERY."""
    try:
        results = _engine(_load(config)).search(query, limit=limit, lang=lang)
    except (OSError, BlogSearchError) as e:
        click.echo(f"✗ Search failed: {e}", err=True)
        raise click.Abort()

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2))
        return

    if not results:
        click.echo("No results")
        return
    for i, r in enumerate(results, 1):
        click.echo(f"{i}. [{r.score}] {r.title} ({r.url})")
        if r.snippet:
            click.echo(f"   {r.snippet}")


@cli.command()
@config_option
def facets(config: str | None):
    """Print distinct tags, authors and domains."""
    try:
        catalog = _engine(_load(config)).facets()
    except (OSError, BlogSearchError) as e:
        click.echo(f"✗ Facets failed: {e}", err=True)
        raise click.Abort()

    click.echo(json.dumps(catalog.to_dict(), ensure_ascii=False, indent=2))


@cli.command()
@config_option
@click.option("--domain", "domains", multiple=True, help="Allowed domain (repeatable)")
@click.option("--author", "authors", multiple=True, help="Allowed author (repeatable)")
@click.option("--tag", "tags", multiple=True, help="Required tag, any of (repeatable)")
@click.option("--lang", type=click.Choice(["en", "fr"]), default=None, help="Language filter")
@click.option("--limit", "-n", type=int, default=None, help="Page size")
@click.option("--cursor", type=int, default=0, help="Offset of the first item")
def browse(config, domains, authors, tags, lang, limit, cursor):
    """Print one page of courses matching the facet filters."""
    try:
        page = _engine(_load(config)).filtered_browse(
            domains=domains, authors=authors, tags=tags, lang=lang, limit=limit, cursor=cursor
        )
    except (OSError, BlogSearchError) as e:
        click.echo(f"✗ Browse failed: {e}", err=True)
        raise click.Abort()

    for meta in page.items:
        click.echo(f"- {meta.slug}: {meta.title or meta.slug}")
    click.echo(f"Total: {page.total}  Next cursor: {page.next_cursor}")


@cli.command("domains-report")
@config_option
def domains_report(config: str | None):
    """List courses with and without a domain."""
    from blogsearch.maintenance import domain_report

    try:
        report = domain_report(_engine(_load(config)).facet_metas())
    except (OSError, BlogSearchError) as e:
        click.echo(f"✗ Report failed: {e}", err=True)
        raise click.Abort()

    click.echo(f"Total blogs: {report['total']}")
    click.echo("\nBlogs with domains:")
    for slug, domain in report["with_domain"]:
        click.echo(f'- {slug}: "{domain}"')
    click.echo("\nBlogs without domains:")
    for slug in report["without_domain"]:
        click.echo(f"- {slug}")
    click.echo("\nUnique domains:")
    for domain in report["unique_domains"]:
        click.echo(f'- "{domain}"')


@cli.command("remap-domains")
@config_option
@click.option("--dry-run", is_flag=True, help="Report changes without writing")
def remap_domains(config: str | None, dry_run: bool):
    """Rewrite legacy course domains using maintenance.domain_mappings."""
    from blogsearch.maintenance import remap_domains as run_remap

    try:
        cfg = _load(config)
    except (OSError, BlogSearchError) as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        raise click.Abort()

    if not cfg.maintenance.domain_mappings:
        click.echo("✗ No domain_mappings configured", err=True)
        raise click.Abort()

    changes = run_remap(
        _blog_root(cfg), cfg.maintenance.domain_mappings, cfg.content.course_file, dry_run=dry_run
    )
    for change in changes:
        click.echo(f"{change.path}: {change.before} -> {change.after}")
    click.echo(f"{'Would update' if dry_run else 'Updated'} {len(changes)} domain line(s)")


@cli.command("prune-tags")
@config_option
@click.option("--dry-run", is_flag=True, help="Report changes without writing")
def prune_tags(config: str | None, dry_run: bool):
    """Remove maintenance.redundant_tags from course and slide files."""
    from blogsearch.maintenance import prune_redundant_tags

    try:
        cfg = _load(config)
    except (OSError, BlogSearchError) as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        raise click.Abort()

    if not cfg.maintenance.redundant_tags:
        click.echo("✗ No redundant_tags configured", err=True)
        raise click.Abort()

    changes = prune_redundant_tags(
        _blog_root(cfg),
        cfg.maintenance.redundant_tags,
        (cfg.content.course_file, cfg.content.slides_file),
        dry_run=dry_run,
    )
    for change in changes:
        click.echo(f"{change.path}: {change.after}")
    click.echo(f"{'Would update' if dry_run else 'Updated'} {len(changes)} file(s)")


@cli.command()
@config_option
@click.option("--host", default=None, help="Bind address (overrides config)")
@click.option("--port", type=int, default=None, help="Port (overrides config)")
def serve(config: str | None, host: str | None, port: int | None):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from blogsearch.api.app import create_app

    try:
        cfg = _load(config)
    except (OSError, BlogSearchError) as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        raise click.Abort()

    uvicorn.run(create_app(cfg), host=host or cfg.api.host, port=port or cfg.api.port)


def main():
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
