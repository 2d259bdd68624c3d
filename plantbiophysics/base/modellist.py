# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
import logging
import warnings

from .. import exceptions as exc
from ..settings import settings
from .models import PROCESSES
from .variables import to_initialize, inputs, outputs, variables
from .status import init_status, uninitialized_variables
from .timesteptable import TimeStepTable, homogeneous_type_steps


def check_initialization(obj, to_init_vars, logger):
    """当 obj 的 Status 中仍有未初始化的变量时发出警告，严格模式下抛出 InitializationError。

    :return: 仍未初始化的变量名列表
    """
    missing = []
    for row in obj.status:
        missing.extend(v for v in uninitialized_variables(row, to_init_vars) if v not in missing)
    if not missing:
        return missing

    msg = "Some variables must be initialized before simulation: %s" % missing
    if settings.STRICT_INITIALIZATION:
        raise exc.InitializationError(msg)
    if settings.UNINITIALIZED_WARNING:
        logger.warning(msg)
        warnings.warn(msg, exc.InitializationWarning, stacklevel=3)
    return missing


def check_status_variables(table, varnames):
    """检查作为状态给出的 TimeStepTable 是否恰好包含模型的全部变量"""
    keys = list(table.keys())
    unknown = [v for v in keys if v not in varnames]
    if unknown:
        msg = ("Variable(s) %s provided in the status table but not found as a variable of " +
               "any of the models.") % unknown
        raise exc.UnknownVariableError(msg)

    absent = [v for v in varnames if v not in keys]
    if absent:
        msg = "Variable(s) %s of the models are missing from the status table." % absent
        raise exc.ConfigurationError(msg)


class ModelList(object):
    """一个模拟对象（例如一片叶子）：每个过程至多一个模型，加上对象的状态。

    :param light_interception: 光截获模型，可选
    :param energy_balance: 能量平衡模型，可选
    :param photosynthesis: 光合作用模型，可选
    :param stomatal_conductance: 气孔导度模型，可选
    :param status: 变量初始值的字典，值可以是标量或序列（每个时间步一个值）
    :param variables_check: 构造时检查必需变量是否已初始化

    状态总是以 TimeStepTable 的形式保存，标量初始值得到长度为 1 的表格。未给出初始值的变量
    被设为未初始化的哨兵值::

        >>> leaf = ModelList(photosynthesis=Fvcb(),
        ...                  stomatal_conductance=Medlyn(0.03, 12.0),
        ...                  status=dict(Tl=25.0, PPFD=1000.0, Cs=400.0, Dl=[0.82, 1.0]))
        >>> len(leaf)
        2
        >>> leaf["Dl"]
        [0.82, 1.0]
        >>> leaf.to_initialize()
        {'photosynthesis': [], 'stomatal_conductance': []}
    """

    def __init__(self, light_interception=None, energy_balance=None, photosynthesis=None,
                 stomatal_conductance=None, status=None, variables_check=True):
        models = {"light_interception": light_interception,
                  "energy_balance": energy_balance,
                  "photosynthesis": photosynthesis,
                  "stomatal_conductance": stomatal_conductance}

        for process, model in models.items():
            if model is not None and not isinstance(model, PROCESSES[process]):
                msg = "Model %s given for process '%s' should be an instance of %s." % \
                      (type(model).__name__, process, PROCESSES[process].__name__)
                raise exc.ConfigurationError(msg)
        self._models = models

        bound = [m for m in models.values() if m is not None]
        if isinstance(status, TimeStepTable):
            check_status_variables(status, variables(*bound))
            self._status = status
        else:
            steps = homogeneous_type_steps(status)
            self._status = TimeStepTable([init_status(bound, step) for step in steps])

        if variables_check:
            check_initialization(self, self.to_initialize(flat=True), self.logger)

    @property
    def logger(self):
        loggername = "%s.%s" % (self.__class__.__module__,
                                self.__class__.__name__)
        return logging.getLogger(loggername)

    @property
    def models(self):
        return self._models

    @property
    def status(self):
        return self._status

    def __len__(self):
        return len(self._status)

    def __getitem__(self, item):
        return self._status[item]

    def __setitem__(self, key, value):
        self._status[key] = value

    def __getattr__(self, item):
        # 过程名返回对应的模型，例如 leaf.photosynthesis
        if item.startswith("_"):
            raise AttributeError(item)
        if item in PROCESSES:
            return self._models[item]
        msg = "'ModelList' object has no attribute '%s'" % item
        raise AttributeError(msg)

    def to_initialize(self, flat=False):
        """返回每个过程仍需初始化的输入变量。

        一个输入如果由对象上任何其他模型输出，就不需要初始化。

        :param flat: 为 True 时返回所有过程合并后的变量名列表，否则返回过程名到变量名列表的字典
        """
        bound = [m for m in self._models.values() if m is not None]
        needed = to_initialize(*bound)
        per_process = {}
        for process, model in self._models.items():
            if model is None:
                continue
            per_process[process] = [v for v in inputs(model)
                                    if v in needed and self._uninitialized_somewhere(v)]
        if flat:
            return list(dict.fromkeys(v for vs in per_process.values() for v in vs))
        return per_process

    def _uninitialized_somewhere(self, varname):
        return any(uninitialized_variables(row, [varname]) for row in self._status)

    def is_initialized(self):
        """当所有必需变量在所有时间步上都已初始化时返回 True。"""
        return len(self.to_initialize(flat=True)) == 0

    def init_status(self, **values):
        """在所有时间步上设置变量的值。不属于任何模型的变量被记录并跳过。"""
        for varname, value in values.items():
            if varname not in self._status.keys():
                msg = "Variable '%s' is not a variable of any of the models, skipping it." % \
                      varname
                self.logger.info(msg)
                continue
            self._status[varname] = value

    def outputs(self):
        """对象上所有模型的输出变量"""
        return outputs(*self._models.values())

    def copy(self, status=None):
        """返回一个共享模型、但拥有独立状态的副本。

        :param status: 新副本使用的状态（TimeStepTable 或初始值字典），默认为当前状态的深拷贝
        """
        if status is None:
            status = self._status.copy()
        return ModelList(status=status, variables_check=False, **self._models)

    def to_dataframe(self):
        """以 pandas DataFrame 返回状态，每个时间步一行。"""
        return self._status.to_dataframe()

    def __str__(self):
        msg = "ModelList with %i time-steps\n" % len(self)
        for process, model in self._models.items():
            msg += "  - %s: %r\n" % (process, model)
        return msg
