from collections.abc import Sequence

from conceptmap.config.settings import Settings
from conceptmap.diagram.merger import DiagramMerger
from conceptmap.extraction.extractor import DocumentExtractor
from conceptmap.extraction.models import UploadedFile
from conceptmap.extraction.normalizer import DocumentNormalizer
from conceptmap.generation.factory import GeneratorFactory
from conceptmap.generation.prompt_composer import PromptComposer
from conceptmap.logging.logger import Log
from conceptmap.ocr.extractor import OcrExtractor
from conceptmap.ocr.tesseract_adapter import TesseractAdapter
from conceptmap.pdf.factory import PdfRasterizerFactory
from conceptmap.pdf.page_extractor import PdfPageExtractor
from conceptmap.processor.pipeline import PipelineContext, PipelineStep
from conceptmap.processor.steps import (
    ComposeCombinedPromptStep,
    ComposePerFilePromptsStep,
    DirectOutputStep,
    ExtractTextStep,
    GenerateStep,
    MergeStep,
    NormalizeStep,
)

PIPELINE_MODES = ("combined", "per_file")


class Processor:
    """Runs uploaded files through the configured pipeline steps.

    combined: extract -> normalize -> one prompt -> generate -> output.
    per_file: extract -> normalize -> prompt per file -> generate each -> merge.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    async def process(self, files: Sequence[UploadedFile]) -> str:
        Log.info(f"Processing {len(files)} uploaded files")
        context = PipelineContext(files=list(files))
        for step in self._steps:
            context = await step.run(context)
        return context.diagram


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    mode = settings.pipeline_mode.lower()
    if mode not in PIPELINE_MODES:
        raise ValueError(
            f"Unknown pipeline mode '{mode}'. Choose from: {list(PIPELINE_MODES)}"
        )

    ocr = OcrExtractor(
        TesseractAdapter(
            language=settings.ocr_language,
            tesseract_cmd=settings.tesseract_cmd,
        )
    )
    pdf_extractor = PdfPageExtractor(
        rasterizer=PdfRasterizerFactory.create(settings),
        ocr=ocr,
        max_pages=settings.pdf_max_pages,
    )
    extractor = DocumentExtractor(ocr=ocr, pdf_extractor=pdf_extractor)
    normalizer = DocumentNormalizer(max_chars=settings.max_chars_per_file)
    composer = PromptComposer()
    generator = GeneratorFactory.create(settings)

    steps: list[PipelineStep] = [ExtractTextStep(extractor), NormalizeStep(normalizer)]
    if mode == "per_file":
        steps += [
            ComposePerFilePromptsStep(composer),
            GenerateStep(generator),
            MergeStep(DiagramMerger()),
        ]
    else:
        steps += [
            ComposeCombinedPromptStep(composer),
            GenerateStep(generator),
            DirectOutputStep(),
        ]
    return Processor(steps)
