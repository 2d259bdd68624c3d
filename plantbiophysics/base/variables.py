# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""模型变量的注册。

每个模型类通过类属性 `inputs_` 和 `outputs_` 声明它从 Status 读取的输入变量和写入的输出变量。
本模块的函数在一个或多个模型上取这些声明的并集，并据此推断哪些变量必须由用户初始化：
如果同一个对象上的任何一个模型输出了某个变量，该变量就不需要初始化，即使它是另一个模型的输入。

示例::

    >>> from plantbiophysics import Fvcb, Medlyn, Monteith
    >>> from plantbiophysics.base import to_initialize
    >>> to_initialize(Fvcb(), Medlyn(0.03, 12.0))
    ['PPFD', 'Tl', 'Cs', 'Dl']
    >>> to_initialize(Monteith(), Fvcb(), Medlyn(0.03, 12.0))
    ['Rs', 'sky_fraction', 'd', 'PPFD']

`None` 表示对象上没有模拟该过程，它不贡献任何变量。
"""
from .. import exceptions as exc

# 标记变量尚未初始化的哨兵值
UNINITIALIZED = float("-inf")


def _union(names):
    # 保持首次出现的顺序
    return list(dict.fromkeys(names))


def inputs(*models):
    """返回一个或多个模型的输入变量（并集）。"""
    return _union(v for m in models if m is not None for v in m.inputs_)


def outputs(*models):
    """返回一个或多个模型的输出变量（并集）。"""
    return _union(v for m in models if m is not None for v in m.outputs_)


def variables(*models):
    """返回一个或多个模型需要的全部变量，即输入与输出的并集。"""
    return _union(inputs(*models) + outputs(*models))


def to_initialize(*models):
    """返回必须由用户初始化的变量：所有模型的输入减去所有模型的输出。"""
    outs = set(outputs(*models))
    return [v for v in inputs(*models) if v not in outs]


def init_variables(*models):
    """返回模型全部变量到未初始化哨兵值的字典。"""
    return {varname: UNINITIALIZED for varname in variables(*models)}


def init_variables_manual(*models, **values):
    """与 init_variables() 相同，但用给定的关键字参数覆盖默认值。

    如果某个关键字不是任何模型的变量，则抛出 UnknownVariableError。

    示例::

        >>> init_variables_manual(Monteith(), Tl=20.0)["Tl"]
        20.0
    """
    init_vars = init_variables(*models)
    for varname, value in values.items():
        if varname not in init_vars:
            msg = "Key %s not found as a variable of any provided models." % varname
            raise exc.UnknownVariableError(msg)
        init_vars[varname] = value
    return init_vars
