# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
import os
import importlib.util

from . import default_settings


def _load_user_settings(fname):
    """导入用户设置文件，文件不存在时返回 None。"""
    if not os.path.exists(fname):
        return None

    try:
        spec = importlib.util.spec_from_file_location("user_settings", fname)
        mod = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(mod)
    except Exception as e:
        msg = "Could not import user settings from '%s' (is there an error in the file?): %s"
        raise ImportError(msg % (fname, e))
    return mod


class Settings(object):
    """
    plantbiophysics 的设置。

    默认值来自 plantbiophysics.settings.default_settings，之后由
    $HOME/.plantbiophysics/user_settings.py（如果存在）中的值覆盖。
    只有全大写的名称被视为设置项，以下划线开头的名称被忽略。
    """

    def __init__(self):
        self._update_from_module(default_settings, "default")
        mod = _load_user_settings(os.path.join(self.PB_USER_HOME, "user_settings.py"))
        if mod is not None:
            self._update_from_module(mod, "user")

    def __setattr__(self, name, value):
        # 日志目录必须在配置日志之前存在
        if name == "LOG_DIR":
            os.makedirs(value, exist_ok=True)
        object.__setattr__(self, name, value)

    def _update_from_module(self, mod, origin):
        for name in dir(mod):
            if name.startswith("_"):
                continue
            if not name.isupper():
                # 此时日志系统尚未配置
                print("Warning: setting '%s' in %s settings is not ALL_CAPS and is ignored." %
                      (name, origin))
                continue
            setattr(self, name, getattr(mod, name))

# 从 default_settings 和 user_settings 初始化设置
settings = Settings()
