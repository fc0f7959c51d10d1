from .requests import CutRequest, TagRequest, build_cut_request, build_tag_request

__all__ = ["CutRequest", "TagRequest", "build_cut_request", "build_tag_request"]
