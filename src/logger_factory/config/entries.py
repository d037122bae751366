import typer

from .model import Templates


def plain_templates() -> Templates:
    return Templates(
        debug="[$[caller]] $[message]",
        info="[$[caller]] $[message]",
        warn="[$[caller]] $[message]",
        error="[$[caller]] $[message] $[err]",
    )


def colored_templates() -> Templates:
    return Templates(
        debug=typer.style("[$[caller]] $[message]", fg=typer.colors.CYAN, bold=True),
        info=typer.style("[$[caller]] $[message]", fg=typer.colors.BLUE, bold=True),
        warn=typer.style("[$[caller]] $[message]", fg=typer.colors.YELLOW, bold=True),
        error=typer.style("[$[caller]] $[message] $[err]", fg=typer.colors.RED, bold=True),
    )
