import asyncio

from conceptmap.diagram.merger import DiagramMerger
from conceptmap.extraction.extractor import DocumentExtractor
from conceptmap.extraction.models import CombinedCorpus
from conceptmap.extraction.normalizer import DocumentNormalizer
from conceptmap.generation.generator import DiagramGenerator
from conceptmap.generation.prompt_composer import PromptComposer
from conceptmap.logging.logger import Log
from conceptmap.processor.pipeline import PipelineContext, PipelineStep


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: DocumentExtractor) -> None:
        self._extractor = extractor

    async def run(self, context: PipelineContext) -> PipelineContext:
        for file in context.files:
            result = await asyncio.to_thread(self._extractor.extract, file)
            context.extraction_results.append(result)
        Log.info(f"Extracted text from {len(context.extraction_results)} files")
        return context


class NormalizeStep(PipelineStep):
    def __init__(self, normalizer: DocumentNormalizer) -> None:
        self._normalizer = normalizer

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.segments = [
            self._normalizer.normalize(result) for result in context.extraction_results
        ]
        truncated = sum(1 for segment in context.segments if segment.truncated)
        Log.info(f"Normalized {len(context.segments)} segments ({truncated} truncated)")
        return context


class ComposeCombinedPromptStep(PipelineStep):
    def __init__(self, composer: PromptComposer) -> None:
        self._composer = composer

    async def run(self, context: PipelineContext) -> PipelineContext:
        corpus = CombinedCorpus(segments=list(context.segments))
        context.prompts = [self._composer.compose_combined(corpus)]
        return context


class ComposePerFilePromptsStep(PipelineStep):
    def __init__(self, composer: PromptComposer) -> None:
        self._composer = composer

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.prompts = [
            self._composer.compose_for_file(segment) for segment in context.segments
        ]
        return context


class GenerateStep(PipelineStep):
    """Sends prompts one at a time, keeping fragments in prompt order."""

    def __init__(self, generator: DiagramGenerator) -> None:
        self._generator = generator

    async def run(self, context: PipelineContext) -> PipelineContext:
        for index, prompt in enumerate(context.prompts, start=1):
            fragment = await self._generator.generate(prompt)
            context.fragments.append(fragment)
            Log.info(
                f"Prompt {index}/{len(context.prompts)} answered"
                f"{' with fallback' if fragment.is_fallback else ''}"
            )
        return context


class DirectOutputStep(PipelineStep):
    async def run(self, context: PipelineContext) -> PipelineContext:
        if not context.fragments:
            raise ValueError("PipelineContext.fragments must be set before output")
        context.diagram = context.fragments[0].text
        return context


class MergeStep(PipelineStep):
    def __init__(self, merger: DiagramMerger) -> None:
        self._merger = merger

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.diagram = self._merger.merge(context.fragments).render()
        return context
