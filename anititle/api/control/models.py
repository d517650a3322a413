"""
外部控制API - 请求/响应模型
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ParsedTitleResponse(BaseModel):
    title: str
    episodeRange: str = Field(..., description="集数范围规范形式，如 '05..05'、'S1'、'S1+S2'、'SP01..SP01'、'S?'")
    episodeKind: str = Field(..., description="集数范围变体: Single / Range / Season / SeasonSet / Special / Unknown")
    knownEpisodes: str = Field("", description="明确包含的集数，紧凑格式如 '1-3, 5'")
    subtitleLanguages: List[str] = Field(default_factory=list, description="字幕语言代码，按代码升序")
    resolution: Optional[str] = Field(None, description="分辨率，如 '1080P'，无法识别时为 null")


class BatchParseRequest(BaseModel):
    titles: List[str] = Field(..., description="待解析的标题列表")
