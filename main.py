import logging
import sys
from typing import Optional

from models import PipelineOutcome, PipelineReport, PipelineSettings
from people import person_methods, sample_people, youngest_adult
from records import format_value
from utils import EmptySequenceError

logger = logging.getLogger('record_pipeline.main')


def run(settings: Optional[PipelineSettings] = None) -> PipelineReport:
    """Run the grow-up pipeline once over the sample roster."""
    if settings is None:
        settings = PipelineSettings.from_env()

    people = sample_people(person_methods(settings.adult_age))
    logger.info(
        "Running pipeline over %s (increment=%d, adult_age=%d)",
        format_value([p.describe() for p in people]), settings.increment, settings.adult_age,
    )

    try:
        chosen = youngest_adult(people, increment=settings.increment, key_field=settings.key_field)
    except EmptySequenceError as e:
        logger.warning("No adults after growing up: %s", e)
        return PipelineReport(outcome=PipelineOutcome.EMPTY, error=str(e), settings=settings)

    logger.info("Youngest adult: %s", chosen.describe())
    return PipelineReport(
        outcome=PipelineOutcome.FOUND,
        result=chosen.as_dict(),
        display=format_value(chosen),
        settings=settings,
    )


def main() -> int:
    settings = PipelineSettings.from_env()
    logging.getLogger('record_pipeline').setLevel(settings.logging_level)
    report = run(settings)
    print(report.model_dump_json(indent=2))
    return 0 if report.outcome == PipelineOutcome.FOUND else 1


if __name__ == "__main__":
    sys.exit(main())
