# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""模型参数使用的 traits。

所有模块都从这里导入 traits，实际的实现来自适配过的 traitlets 包 'traitlets_pcse'。
参数 traits 默认允许 `None`，并在赋值时检查类型：

* Float 接受任何可以用 float() 转换的值（例如来自表格的字符串 "0.03"）；
* Int 接受整数形式的浮点数（例如 50.0）；
* Bool 与 traitlets_pcse 相同。

类型不符时抛出 ParameterError，错误信息中给出模型与参数的名称。
"""
import traitlets_pcse as tr
from traitlets_pcse import HasTraits

from . import exceptions as exc


def _parameter_error(trait, obj, value, expected):
    msg = "Parameter '%s' of %s should be %s, got %r." % \
          (trait.name, type(obj).__name__, expected, value)
    raise exc.ParameterError(msg)


class Float(tr.Float):

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("allow_none", True)
        tr.Float.__init__(self, *args, **kwargs)

    def validate(self, obj, value):
        try:
            return float(value)
        except (TypeError, ValueError):
            _parameter_error(self, obj, value, "a number")


class Int(tr.Int):

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("allow_none", True)
        tr.Int.__init__(self, *args, **kwargs)

    def validate(self, obj, value):
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, bool) or not isinstance(value, int):
            _parameter_error(self, obj, value, "an integer")
        return value


class Bool(tr.Bool):

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("allow_none", True)
        tr.Bool.__init__(self, *args, **kwargs)
