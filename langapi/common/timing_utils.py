import time
import logging
import functools


def timeit(func):
    """
    记录被装饰函数的执行耗时（包括抛出异常的情况）
    """
    logger = logging.getLogger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()  # 高精度计时器
        try:
            return func(*args, **kwargs)
        finally:
            duration = time.perf_counter() - start_time
            logger.info(f"{func.__qualname__} 执行耗时: {duration:.3f} 秒")

    return wrapper
