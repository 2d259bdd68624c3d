# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
import copy

import pandas as pd

from .. import exceptions as exc
from ..util import is_sequence
from .status import Status


def homogeneous_type_steps(values):
    """把变量名到值的映射转换为逐时间步的记录列表。

    值可以是标量，也可以是长度相同的序列。时间步数 L 为最长序列的长度：标量被复制到每个时间步，
    序列按索引分配到各时间步。长度既不是 1 也不是 L 的序列会引发 ConfigurationError。

    :param values: 变量名到标量或序列的字典
    :return: 长度至少为 1 的字典列表

    示例::

        >>> homogeneous_type_steps({"a": 5.0, "b": [1.0, 2.0, 3.0]})
        [{'a': 5.0, 'b': 1.0}, {'a': 5.0, 'b': 2.0}, {'a': 5.0, 'b': 3.0}]
    """
    if values is None:
        return [{}]

    lengths = {}
    for varname, value in values.items():
        lengths[varname] = len(value) if is_sequence(value) else 1

    nsteps = max(lengths.values()) if lengths else 1
    wrong = [varname for varname, l in lengths.items() if l not in (1, nsteps)]
    if wrong:
        msg = "Variable(s) %s should be given with length %i or 1." % (wrong, nsteps)
        raise exc.ConfigurationError(msg)

    steps = []
    for i in range(nsteps):
        step = {}
        for varname, value in values.items():
            if is_sequence(value):
                value = list(value)
                step[varname] = value[i] if len(value) == nsteps else value[0]
            else:
                step[varname] = value
        steps.append(step)
    return steps


class TimeStepTable(object):
    """按时间步排列的 Status 序列，所有 Status 拥有相同的变量集合。

    TimeStepTable 提供按行（一个时间步的 Status）和按列（一个变量在所有时间步上的值）的访问::

        >>> ts = TimeStepTable([Status(Rs=13.747, d=0.03), Status(Rs=12.0, d=0.03)])
        >>> ts[0].Rs            # 第一行
        13.747
        >>> ts["Rs"]            # 一列
        [13.747, 12.0]
        >>> ts[1, "Rs"]         # 一个单元格
        12.0
        >>> ts["d"] = 0.05      # 为所有时间步赋值
        >>> ts.d
        [0.05, 0.05]

    行是对内部 Status 的引用，修改行会直接修改表格。
    """

    def __init__(self, statuses):
        if isinstance(statuses, Status):
            statuses = [statuses]
        rows = list(statuses)
        if len(rows) == 0:
            msg = "A TimeStepTable needs at least one time-step."
            raise exc.ConfigurationError(msg)

        for i, row in enumerate(rows):
            if not isinstance(row, Status):
                msg = "TimeStepTable rows should be Status instances, found %s at step %i."
                raise exc.ConfigurationError(msg % (type(row).__name__, i))

        names = rows[0].keys()
        for i, row in enumerate(rows):
            if row.keys() != names:
                msg = "All time-steps of a TimeStepTable should share the same variables " + \
                      "(step %i differs)."
                raise exc.ConfigurationError(msg % i)
        object.__setattr__(self, "_rows", rows)

    @classmethod
    def from_dataframe(cls, df):
        """由 pandas DataFrame 构建 TimeStepTable，每行一个时间步。"""
        return cls([Status(r) for r in df.to_dict(orient="records")])

    def keys(self):
        return self._rows[0].keys()

    def __len__(self):
        return len(self._rows)

    def __iter__(self):
        return iter(self._rows)

    def __getattr__(self, item):
        if item.startswith("_"):
            raise AttributeError(item)
        if item in self._rows[0]:
            return self[item]
        msg = "TimeStepTable has no variable '%s'." % item
        raise AttributeError(msg)

    def __setattr__(self, key, value):
        self[key] = value

    def __getitem__(self, item):
        if isinstance(item, tuple):
            row, col = item
            return self._rows[row][col]
        if isinstance(item, str):
            if item not in self._rows[0]:
                msg = "TimeStepTable has no variable '%s'." % item
                raise KeyError(msg)
            return [row[item] for row in self._rows]
        return self._rows[item]

    def __setitem__(self, key, value):
        if isinstance(key, tuple):
            row, col = key
            self._rows[row][col] = value
            return

        if isinstance(key, int):
            if not isinstance(value, Status) or value.keys() != self.keys():
                msg = "A row of a TimeStepTable can only be replaced by a Status with the " + \
                      "same variables."
                raise exc.ConfigurationError(msg)
            self._rows[key] = value
            return

        if is_sequence(value):
            value = list(value)
            if len(value) != len(self):
                msg = "Cannot set %i values to variable '%s' in a TimeStepTable of length %i."
                raise exc.ConfigurationError(msg % (len(value), key, len(self)))
        else:
            value = [value] * len(self)
        for row, v in zip(self._rows, value):
            row[key] = v

    def __eq__(self, other):
        if not isinstance(other, TimeStepTable):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None

    def __getstate__(self):
        return self._rows

    def __setstate__(self, state):
        object.__setattr__(self, "_rows", state)

    def __str__(self):
        return "TimeStepTable with %i time-steps and %i variables:\n%s" % \
               (len(self), len(self.keys()), self.to_dataframe())

    def copy(self):
        """返回一个独立的深拷贝。"""
        return copy.deepcopy(self)

    def export(self):
        """以字典列表导出表格内容，每个时间步一个字典。"""
        return [row.as_dict() for row in self._rows]

    def to_dataframe(self):
        """转换为 pandas DataFrame：每个时间步一行，每个变量一列。"""
        return pd.DataFrame(self.export(), columns=self.keys())
