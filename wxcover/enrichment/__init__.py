"""
WeChat Cover Enrichment Module - 封面图下载与内联
"""
from .inline_image import fetch_inline_image, to_data_uri

__all__ = ["fetch_inline_image", "to_data_uri"]
