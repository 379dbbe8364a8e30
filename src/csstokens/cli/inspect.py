"""CLI command: csstokens inspect -- summarize the extracted tokens."""

from __future__ import annotations

import click

from csstokens.cli.extract import run_or_exit


@click.command()
@click.argument("cssfiles", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def inspect(cssfiles: tuple[str, ...]) -> None:
    """Display token groups, their tokens and hard-coded value counts."""
    result = run_or_exit(cssfiles)

    click.echo(f"Files:  {len(cssfiles)}")
    click.echo(f"Groups: {len(result.token_groups)}")
    click.echo(f"Tokens: {len(result.tokens)}")
    click.echo()

    for group in result.token_groups:
        end = group.position.end if group.position.end is not None else "EOF"
        header = f"{group.label} ({group.filename}:{group.position.start}-{end})"
        if group.presenter:
            header += f" presenter={group.presenter}"
        click.echo(header)
        for token in group.tokens:
            parts = [f"  {token.key}: {token.value}"]
            if token.aliases:
                parts.append(f"aliases={','.join(token.aliases)}")
            if token.description:
                parts.append(f'"{token.description}"')
            click.echo("  ".join(parts))
    click.echo()

    click.echo("Hard-coded values:")
    if not result.hard_coded_values:
        click.echo("  (none)")
    for match in result.hard_coded_values:
        click.echo(f"  {match.token_key}: {len(match.occurrences)} occurrence(s)")
        for occurrence in match.occurrences:
            click.echo(f"    {occurrence.file}:{occurrence.line}  {occurrence.value}")
