"""Configuration models."""

from typing import Literal
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class NormalizerConfig(BaseModel):
    """Page text normalization configuration."""

    footer_marker: str = Field("& /en", description="Literal footer text preceding the page number")
    max_page_digits: int = Field(3, ge=1, description="Max page-number digits removed after the marker")

    model_config = {
        "json_schema_extra": {
            "example": {
                "footer_marker": "& /en",
                "max_page_digits": 3
            }
        }
    }


class ExtractionConfig(BaseModel):
    """PDF text extraction configuration."""

    min_page_length: int = Field(0, ge=0, description="Pages with less stripped text are emitted empty")

    model_config = {
        "json_schema_extra": {
            "example": {
                "min_page_length": 0
            }
        }
    }


class Config(BaseSettings):
    """Main application configuration."""

    normalizer: NormalizerConfig = Field(default_factory=NormalizerConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)

    # Output
    output_dir: str = Field("output", description="Output directory for cleaned documents")
    output_format: Literal["json", "txt", "csv"] = Field("json", description="Output file format")

    model_config = {
        "env_prefix": "PAGECLEAN_",
        "env_nested_delimiter": "__",
        "json_schema_extra": {
            "example": {
                "normalizer": {"footer_marker": "& /en", "max_page_digits": 3},
                "extraction": {"min_page_length": 0},
                "output_dir": "output",
                "output_format": "json"
            }
        }
    }
