from fastapi import Request

from conceptmap.config.settings import Settings
from conceptmap.processor.processor import Processor


def get_processor(request: Request) -> Processor:
    return request.app.state.processor


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
