#!/usr/bin/env python3
"""
启动脚本 - 书店库存演示
使用方法: python run.py [--debug]
"""

import logging
import sys

from bookstore.main import setup_logging, create_service, run_demo

if __name__ == "__main__":
    debug = "--debug" in sys.argv[1:]

    # 调试模式下输出DEBUG日志并写入 debug.log
    if debug:
        setup_logging(level=logging.DEBUG, log_file='debug.log')
    else:
        setup_logging()

    logging.info("=" * 60)
    logging.info("启动书店库存演示")
    logging.info(f"日志级别: {'DEBUG' if debug else logging.getLevelName(logging.getLogger().level)}")
    logging.info("=" * 60)

    paid = run_demo(create_service())
    logging.info(f"支付记录: {[str(amount) for amount in paid]}")
