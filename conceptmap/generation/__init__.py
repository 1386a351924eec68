from conceptmap.generation.factory import GeneratorFactory
from conceptmap.generation.generator import DiagramGenerator
from conceptmap.generation.prompt_composer import PromptComposer

__all__ = ["DiagramGenerator", "GeneratorFactory", "PromptComposer"]
