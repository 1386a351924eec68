from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from conceptmap.diagram.models import DiagramFragment
from conceptmap.extraction.models import ExtractionResult, NormalizedSegment, UploadedFile


@dataclass(slots=True)
class PipelineContext:
    files: list[UploadedFile]
    extraction_results: list[ExtractionResult] = field(default_factory=list)
    segments: list[NormalizedSegment] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)
    fragments: list[DiagramFragment] = field(default_factory=list)
    diagram: str = ""


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
