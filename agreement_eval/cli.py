from pathlib import Path
from typing import List, NoReturn, Optional, Set, Tuple

import typer
from typing_extensions import Annotated

from agreement_eval.comparison import evaluate_candidates
from agreement_eval.datasets import Result
from agreement_eval.formats import read_result
from agreement_eval.metrics import max_kendall_of, select_metrics
from agreement_eval.report import format_score, format_table, generate_html_report, to_json
from agreement_eval.types import AgreementError, ConfigurationError
from agreement_eval.utils import get_logger, setup_logging
from agreement_eval.utils.config import load_config

logger = get_logger(__name__)

app = typer.Typer(
    help="Compare candidate datasets against a ground truth with agreement metrics.",
    add_completion=False,
)


def _fail(error: AgreementError, source: Optional[Path] = None) -> NoReturn:
    """Report a fatal library error and abort the run."""
    where = f"{source}: " if source is not None else ""
    line = error.context.get("line")
    suffix = f" (line {line})" if line is not None else ""
    logger.error(f"{error.error_code}: {error.message}", extra={"context": error.context})
    typer.echo(f"Error: {where}{error.message}{suffix}", err=True)
    raise typer.Exit(code=1)


def _unique_name(path: Path, seen: Set[str]) -> str:
    """File name, falling back to the full path, then a numbered suffix."""
    for name in (path.name, str(path)):
        if name not in seen:
            return name
    index = 2
    while f"{path}#{index}" in seen:
        index += 1
    return f"{path}#{index}"


def _load_all(files: List[Path]) -> List[Tuple[str, Result]]:
    """Parse every file before anything is printed."""
    loaded: List[Tuple[str, Result]] = []
    seen: Set[str] = set()
    for path in files:
        try:
            result = read_result(path)
        except AgreementError as e:
            _fail(e, path)
        name = _unique_name(path, seen)
        seen.add(name)
        logger.info(f"Loaded {path} as {result.shape.value}")
        loaded.append((name, result))
    return loaded


@app.command()
def compare(
    files: Annotated[
        List[Path],
        typer.Argument(help="Truth file followed by one or more candidate files."),
    ],
    config: Annotated[
        Optional[Path], typer.Option("--config", help="YAML configuration file.")
    ] = None,
    metric: Annotated[
        Optional[List[str]],
        typer.Option("--metric", "-m", help="Metric to report; repeat for several. Default: all."),
    ] = None,
    precision: Annotated[
        Optional[int], typer.Option(help="Decimals printed for each coefficient.")
    ] = None,
    placeholder: Annotated[
        Optional[str], typer.Option(help="Text printed where a metric is not applicable.")
    ] = None,
    output_format: Annotated[
        Optional[str], typer.Option("--format", help="Output format: table or json.")
    ] = None,
    show_datasets: Annotated[
        Optional[bool],
        typer.Option("--show-datasets/--hide-datasets", help="Print every parsed dataset."),
    ] = None,
    html_report: Annotated[
        Optional[Path], typer.Option(help="Also write an HTML report to this path.")
    ] = None,
    log_level: Annotated[
        Optional[str], typer.Option(help="Logging level, e.g. INFO or DEBUG.")
    ] = None,
):
    """
    Evaluate every candidate file against the truth file.
    """
    if len(files) < 2:
        raise typer.BadParameter(
            "Must have at least 2 arguments, the truth and one evaluation result",
            param_hint="FILES",
        )

    try:
        cfg = load_config(
            config,
            overrides={
                "metrics.enabled": list(metric) if metric else None,
                "output.precision": precision,
                "output.placeholder": placeholder,
                "output.format": output_format,
                "output.show_datasets": show_datasets,
                "logging.level": log_level,
            },
        )
    except ConfigurationError as e:
        raise typer.BadParameter(e.message)

    setup_logging(
        level=str(cfg.logging.level).upper(),
        log_file=cfg.logging.file,
        json_format=cfg.logging.json_format,
        log_format=cfg.logging.format,
    )

    loaded = _load_all(files)
    truth_name, truth = loaded[0]
    candidates = dict(loaded[1:])
    metrics = select_metrics(cfg.metrics.enabled)
    out = cfg.output

    try:
        max_kendall = max_kendall_of(truth) if out.show_max_kendall else None
        rows = evaluate_candidates(truth, candidates, [m.name for m in metrics])
    except AgreementError as e:
        _fail(e)

    if out.format == "json":
        typer.echo(to_json(truth_name, rows, max_kendall))
    else:
        if out.show_datasets:
            for index, (name, result) in enumerate(loaded):
                title = f"{name} (truth)" if index == 0 else name
                typer.echo(f"{title}:\n{result}\n")
        typer.echo(f"Evaluating against {truth_name}")
        if max_kendall is not None:
            typer.echo(
                f"Max Kendall tau-b (applicable on single ranked lists): "
                f"{format_score(max_kendall, out.precision)}"
            )
        typer.echo("")
        typer.echo(format_table(rows, metrics, out.precision, out.placeholder))

    if html_report is not None:
        html_report.parent.mkdir(parents=True, exist_ok=True)
        generate_html_report(
            truth_name,
            rows,
            metrics,
            str(html_report),
            precision=out.precision,
            placeholder=out.placeholder,
            max_kendall=max_kendall,
        )
        logger.info(f"Agreement report saved to {html_report}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
