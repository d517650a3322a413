import collections
import logging
import logging.handlers
from pathlib import Path
from typing import List

from anititle.core.config import settings

# 这个双端队列将用于在内存中存储最新的日志，以供接口查询
_logs_deque = collections.deque(maxlen=200)

# 自定义一个日志处理器，它会将日志记录发送到我们的双端队列中
class DequeHandler(logging.Handler):
    def __init__(self, deque):
        super().__init__()
        self.deque = deque

    def emit(self, record):
        # 我们只存储格式化后的消息字符串
        self.deque.appendleft(self.format(record))

def setup_logging(log_dir: Path = Path("config/logs")):
    """
    配置根日志记录器，使其能够将日志输出到控制台、一个可轮转的文件，
    以及一个内存双端队列。
    此函数应在应用启动时被调用一次。
    """
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except (OSError, PermissionError) as e:
        # 如果无法创建日志目录，使用当前目录
        print(f"警告: 无法创建日志目录 {log_dir}: {e}，将使用当前目录")
        log_dir = Path(".")
    log_file = log_dir / "app.log"

    # 为控制台和文件日志定义详细的格式
    verbose_formatter = logging.Formatter(
        '[%(asctime)s] [%(name)s:%(lineno)d] [%(levelname)s] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    # 为内存队列定义一个更简洁的格式
    ui_formatter = logging.Formatter('[%(asctime)s] %(message)s', datefmt='%Y-%m-%d %H:%M:%S')

    # 从配置中获取日志级别，如果无效则默认为 INFO
    log_level = getattr(logging, settings.log.level.upper(), logging.INFO)
    logger = logging.getLogger()
    logger.setLevel(log_level)

    # 清理已存在的处理器，以避免在热重载时重复添加
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.addHandler(logging.StreamHandler()) # 控制台处理器
    logger.addHandler(logging.handlers.RotatingFileHandler(log_file, maxBytes=5*1024*1024, backupCount=5, encoding='utf-8')) # 文件处理器

    logger.addHandler(DequeHandler(_logs_deque))

    # 为所有处理器设置格式
    for handler in logger.handlers:
        if isinstance(handler, DequeHandler):
            handler.setFormatter(ui_formatter)
        else:
            handler.setFormatter(verbose_formatter)

    logging.getLogger(__name__).info(f"日志系统已初始化，级别: {logging.getLevelName(log_level)}，文件: {log_file}")

def get_logs() -> List[str]:
    """返回为API存储的日志列表（最新在前）。"""
    return list(_logs_deque)
