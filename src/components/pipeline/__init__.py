from src.components.pipeline.parameter_codec import ParameterCodec
from src.components.pipeline.pipeline_executor import PipelineExecutor
from src.components.pipeline.output_naming import OutputNaming

__all__ = [
    "ParameterCodec",
    "PipelineExecutor",
    "OutputNaming",
]
