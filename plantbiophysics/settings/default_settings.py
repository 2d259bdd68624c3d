# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月

"""plantbiophysics 设置

默认值将从文件 'plantbiophysics/settings/default_settings.py' 读取。
用户特定设置从 '$HOME/.plantbiophysics/user_settings.py' 读取。用户设置中定义的任何设置将覆盖默认设置。

设置必须用全大写字母定义，并可通过 plantbiophysics.settings.settings 作为属性访问。

例如，在 'processes' 下的模块中使用设置:

    from ..settings import settings
    print(settings.METEO_RANGE_CHECKS)

不是全大写的设置将产生警告。为了避免对不是设置的所有内容（如导入的模块）产生警告，需要在名称前加下划线。
"""

import os as _os
import plantbiophysics.util as _util

PB_USER_HOME = _os.path.join(_util.get_user_home(), ".plantbiophysics")

# 对气象变量进行范围检查（clearness 超出 (0, 1]）
METEO_RANGE_CHECKS = True

# 当模拟开始时仍有变量处于未初始化状态时的处理方式。
# False: 仅发出 InitializationWarning 并写入日志，模拟照常进行；
# True: 抛出 InitializationError。
STRICT_INITIALIZATION = False

# 是否在构建 ModelList 以及调用过程时检查变量的初始化状态
UNINITIALIZED_WARNING = True

# 迭代求解（能量平衡、迭代 FvCB）在达到最大迭代次数仍未收敛时的处理方式。
# False: 记录调试信息并发送信号，保留最后一次迭代的结果；
# True: 抛出 NumericalNonConvergence。
NONCONVERGENCE_ERROR = False

# 日志配置
# 日志系统包含两个日志处理器。一个用于将日志消息发送到屏幕（'console'），另一个用于将消息写入文件。
# 日志的位置和名称由 LOG_DIR 和 LOG_FILE_NAME 定义。console 和 file 处理器的日志级别由
# LOG_LEVEL_CONSOLE 和 LOG_LEVEL_FILE 定义。
# 如需查看能量平衡的收敛信息，可以将日志级别设置为 DEBUG，但这将产生大量日志信息。
#
# 日志文件大小可达1MB。当文件达到此大小时会创建新文件，并重命名旧文件。仅保留最近7个日志文件。

# 日志目录
LOG_DIR = _os.path.join(PB_USER_HOME, "logs")
# 日志文件名
LOG_FILE_NAME = _os.path.join(LOG_DIR, "plantbiophysics.log")
# 写入日志文件的日志级别
LOG_LEVEL_FILE = "INFO"
# 控制台输出的日志级别
LOG_LEVEL_CONSOLE = "ERROR"
# 日志的格式：文件中记录时间与记录器名称，屏幕上只显示级别与消息
_LOG_FORMATS = {"standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
                "brief": {"format": "[%(levelname)s] - %(message)s"}}
_CONSOLE_HANDLER = {"class": "logging.StreamHandler",
                    "level": LOG_LEVEL_CONSOLE,
                    "formatter": "brief"}
_FILE_HANDLER = {"class": "logging.handlers.RotatingFileHandler",
                 "level": LOG_LEVEL_FILE,
                 "formatter": "standard",
                 "filename": LOG_FILE_NAME,
                 "maxBytes": 1024**2,
                 "backupCount": 7,
                 "mode": "a",
                 "encoding": "utf8",
                 "delay": True}

# 传递给 logging.config.dictConfig() 的配置
LOG_CONFIG = {"version": 1,
              "disable_existing_loggers": False,
              "formatters": _LOG_FORMATS,
              "handlers": {"console": _CONSOLE_HANDLER, "file": _FILE_HANDLER},
              "root": {"handlers": ["console", "file"], "level": "NOTSET"}}
