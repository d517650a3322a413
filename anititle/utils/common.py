from typing import Any, List


def to_camel(snake_str: str) -> str:
    """将 snake_case 字符串转换为 camelCase。"""
    components = snake_str.split('_')
    # 我们将除第一个之外的每个组件的首字母大写，然后连接起来。
    return components[0] + ''.join(x.title() for x in components[1:])


def convert_keys_to_camel(data: Any) -> Any:
    """
    递归地将字典的键从 snake_case 转换为 camelCase。
    """
    if isinstance(data, dict):
        return {to_camel(k): convert_keys_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys_to_camel(i) for i in data]
    return data


def collapse_whitespace(text: str) -> str:
    """压缩连续空白为单个空格并去除首尾空白"""
    return ' '.join(text.split())


def format_episode_ranges(episodes: List[int], separator: str = ",") -> str:
    """
    将集数列表格式化为紧凑的范围字符串。

    - separator=", " → "1-3, 5, 8-10"
    - separator="," → "1-3,5-7,10"
    """
    indices = sorted(set(episodes))
    if not indices:
        return ""

    ranges = []
    start = end = indices[0]

    for i in range(1, len(indices)):
        if indices[i] == end + 1:
            end = indices[i]
        else:
            ranges.append(str(start) if start == end else f"{start}-{end}")
            start = end = indices[i]
    ranges.append(str(start) if start == end else f"{start}-{end}")
    return separator.join(ranges)
