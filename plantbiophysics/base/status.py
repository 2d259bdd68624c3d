# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
import copy
import math
import logging

from .. import exceptions as exc
from .variables import variables, UNINITIALIZED


def is_uninitialized(value):
    """判断 value 是否为未初始化的哨兵值"""
    try:
        return math.isinf(value) and value < 0
    except TypeError:
        return False


class Status(object):
    """Status 保存一个模拟对象在一个时刻的全部变量值（输入、中间状态与输出）。

    Status 本质上是一个有序的、可修改的记录：变量集合在构造时确定，之后只能修改变量的值，
    不能增加新变量。变量的值可以通过属性（`st.Tl`）、名称（`st["Tl"]`）或位置（`st[0]`）访问。

    两个指向同一个 Status 的引用会看到彼此的修改；`copy()` 返回一个独立的深拷贝。

    示例::

        >>> from plantbiophysics.base import Status
        >>> st = Status(Rs=13.747, sky_fraction=1.0, d=0.03, PPFD=1500.0)
        >>> st.Rs
        13.747
        >>> st["d"] = 0.05
        >>> st[2]
        0.05
        >>> st.Tl = 25.0
        Traceback (most recent call last):
        ...
        plantbiophysics.exceptions.UnknownVariableError: Variable 'Tl' is not a variable of this Status.
    """

    __slots__ = ["_vars"]

    def __init__(self, *args, **kwargs):
        object.__setattr__(self, "_vars", dict(*args, **kwargs))

    def __getattr__(self, item):
        if item.startswith("_"):
            raise AttributeError(item)
        try:
            return self._vars[item]
        except KeyError:
            msg = "Status has no variable '%s'." % item
            raise AttributeError(msg)

    def __setattr__(self, key, value):
        self[key] = value

    def __getitem__(self, item):
        if isinstance(item, int):
            return list(self._vars.values())[item]
        try:
            return self._vars[item]
        except KeyError:
            msg = "Status has no variable '%s'." % item
            raise KeyError(msg)

    def __setitem__(self, key, value):
        if isinstance(key, int):
            key = list(self._vars.keys())[key]
        if key not in self._vars:
            msg = "Variable '%s' is not a variable of this Status." % key
            raise exc.UnknownVariableError(msg)
        self._vars[key] = value

    def __contains__(self, item):
        return item in self._vars

    def __iter__(self):
        return iter(self._vars)

    def __len__(self):
        return len(self._vars)

    def __eq__(self, other):
        if not isinstance(other, Status):
            return NotImplemented
        return self._vars == other._vars

    __hash__ = None

    def __getstate__(self):
        return self._vars

    def __setstate__(self, state):
        object.__setattr__(self, "_vars", state)

    def __repr__(self):
        pairs = ", ".join("%s=%s" % (k, v) for k, v in self._vars.items())
        return "Status(%s)" % pairs

    def __str__(self):
        msg = "Status with %i variables:\n" % len(self)
        for varname, value in self._vars.items():
            if is_uninitialized(value):
                value = "uninitialized"
            msg += "  - %s: %s\n" % (varname, value)
        return msg

    def keys(self):
        return list(self._vars.keys())

    def values(self):
        return list(self._vars.values())

    def items(self):
        return list(self._vars.items())

    def as_dict(self):
        """返回变量名到值的字典（拷贝）。"""
        return dict(self._vars)

    def copy(self):
        """返回一个独立的深拷贝。"""
        return copy.deepcopy(self)

    def is_initialized(self, varname):
        """当变量 varname 不再是哨兵值时返回 True。"""
        return not is_uninitialized(self[varname])


def init_status(models, overrides=None):
    """构建一个 Status：模型声明的全部变量都先设为哨兵值，再用 overrides 覆盖。

    :param models: 模型实例的序列，None 表示该过程未被模拟
    :param overrides: 用户提供的初始值（dict）
    :return: Status

    如果 overrides 中的某个变量不属于任何模型，则抛出 UnknownVariableError，
    因为这通常意味着配置中存在拼写错误。
    """
    st = Status((varname, UNINITIALIZED) for varname in variables(*models))
    if overrides is None:
        return st

    unknown = [varname for varname in overrides if varname not in st]
    if unknown:
        msg = ("Variable(s) %s provided for initialization but not found as a variable of " +
               "any of the models.") % unknown
        raise exc.UnknownVariableError(msg)

    for varname, value in overrides.items():
        st[varname] = value
    return st


def uninitialized_variables(status, to_init_vars):
    """返回 to_init_vars 中仍为哨兵值的变量名列表。"""
    return [varname for varname in to_init_vars if not status.is_initialized(varname)]


def is_initialized(status, to_init_vars):
    """当 to_init_vars 中没有任何变量仍为哨兵值时返回 True。

    :param status: Status 或 TimeStepTable（此时检查所有时间步）
    :param to_init_vars: 必须初始化的变量名
    """
    rows = [status] if isinstance(status, Status) else list(status)
    for row in rows:
        missing = uninitialized_variables(row, to_init_vars)
        if missing:
            logging.getLogger(__name__).debug("Uninitialized variables: %s" % missing)
            return False
    return True
