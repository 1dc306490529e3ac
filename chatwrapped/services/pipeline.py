from pathlib import Path

from chatwrapped.schemas.report import AnalysisResult
from chatwrapped.services.analysis import analyze
from chatwrapped.services.parsing import parse
from chatwrapped.services.storage import read_transcript


async def analyze_file(path: str | Path, year_filter: int | None = None) -> AnalysisResult:
    raw_text = await read_transcript(path)
    return analyze(parse(raw_text), year_filter)
