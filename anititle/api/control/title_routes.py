"""
外部控制API - 标题解析路由
包含: /titles/parse (单条 GET / 批量 POST)
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from anititle.core.config import settings
from anititle.title import parse_cached

from .models import BatchParseRequest, ParsedTitleResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/titles/parse", response_model=ParsedTitleResponse, summary="解析单个发布标题")
async def parse_title(
    title: str = Query(..., description="原始发布标题/文件名"),
):
    """
    ### 功能
    解析发布标题，返回集数范围、字幕语言和分辨率。
    ### 规则
    - 解析不会失败，无法识别的信息返回默认值：集数 `S?`、分辨率 `null`、字幕语言空列表。
    """
    return parse_cached(title).to_dict()


@router.post("/titles/parse", response_model=List[ParsedTitleResponse], summary="批量解析发布标题")
async def parse_titles(payload: BatchParseRequest):
    """
    ### 功能
    批量解析发布标题，结果顺序与请求中的 `titles` 一致。
    ### 规则
    - 单次最多 `parser.max_batch_size` 条，超出返回 400。
    """
    limit = settings.parser.max_batch_size
    if len(payload.titles) > limit:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=f"单次最多解析 {limit} 个标题，当前 {len(payload.titles)} 个")
    logger.info(f"批量解析 {len(payload.titles)} 个标题")
    return [parse_cached(title).to_dict() for title in payload.titles]
