# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""过程的调度函数。

每个过程有两个入口：`<过程>_inplace()` 直接修改模拟对象的状态并返回 None，
`<过程>()` 先复制模拟对象，在副本上计算并返回副本。

模拟对象可以是一个 ModelList，也可以是 ModelList 的列表、元组或字典。气象数据可以是：

* None：模型不需要气象数据时使用；
* Atmosphere：用于所有时间步；
* Weather：与时间步一一对应。状态的长度必须等于 Weather 的长度，或者为 1，
  此时同一个时间步依次用每个气象时间步更新。

对象上未绑定的过程是空操作：状态保持不变。模型依赖的过程（例如能量平衡依赖光合作用）
未绑定时抛出 ConfigurationError。
"""
import logging
from collections.abc import Mapping
from enum import Enum

from .. import exceptions as exc
from ..constants import Constants
from ..base import Atmosphere, Weather, ModelList, to_initialize, check_initialization


class Convergence(Enum):
    """迭代求解的结果"""
    CONVERGED = "converged"
    MAX_ITER_EXCEEDED = "max_iter_exceeded"


def _logger():
    return logging.getLogger(__name__)


def _as_list(objects):
    if isinstance(objects, ModelList):
        return [objects]
    if isinstance(objects, Mapping):
        return list(objects.values())
    if isinstance(objects, (list, tuple)):
        return list(objects)
    msg = "Objects should be a ModelList, or a list, tuple or dict of ModelLists, got %s." % \
          type(objects).__name__
    raise exc.ConfigurationError(msg)


def copy_objects(objects):
    """复制模拟对象（模型共享，状态独立），保持容器类型不变。"""
    if isinstance(objects, ModelList):
        return objects.copy()
    if isinstance(objects, Mapping):
        return {key: obj.copy() for key, obj in objects.items()}
    if isinstance(objects, (list, tuple)):
        return type(objects)(obj.copy() for obj in objects)
    msg = "Objects should be a ModelList, or a list, tuple or dict of ModelLists, got %s." % \
          type(objects).__name__
    raise exc.ConfigurationError(msg)


def _required_models(models, process):
    """返回运行 process 时会被调用的模型（process 的模型及其依赖，递归）。

    依赖的过程未绑定时抛出 ConfigurationError。
    """
    required = []
    pending = [process]
    while pending:
        p = pending.pop(0)
        model = models[p]
        if model is None:
            msg = "Process '%s' requires a model for process '%s', but none is given." % \
                  (process, p)
            raise exc.ConfigurationError(msg)
        if model not in required:
            required.append(model)
            pending.extend(model.dependencies_)
    return required


def _time_steps(obj, meteo):
    """把对象的时间步与气象数据配对。"""
    if meteo is None or isinstance(meteo, Atmosphere):
        return [(row, meteo) for row in obj.status]

    if isinstance(meteo, Weather):
        if len(obj) == len(meteo):
            return list(zip(obj.status, meteo))
        if len(obj) == 1:
            return [(obj.status[0], atm) for atm in meteo]
        msg = "Status has %i time-steps but weather has %i, they should match (or status " + \
              "should have a single time-step)."
        raise exc.ConfigurationError(msg % (len(obj), len(meteo)))

    msg = "Meteo should be None, an Atmosphere or a Weather, got %s." % type(meteo).__name__
    raise exc.ConfigurationError(msg)


def process_inplace(process, objects, meteo=None, constants=None):
    """在每个对象的每个时间步上运行 process，直接修改对象的状态。"""
    if constants is None:
        constants = Constants()

    for obj in _as_list(objects):
        model = obj.models[process]
        if model is None:
            _logger().debug("No model given for process '%s', nothing to do." % process)
            continue

        required = _required_models(obj.models, process)
        if any(m.meteo_required_ for m in required) and meteo is None:
            msg = "Process '%s' with model %s needs meteorological data." % \
                  (process, model.__class__.__name__)
            raise exc.ConfigurationError(msg)

        check_initialization(obj, to_initialize(*required), _logger())

        compute = getattr(model, process)
        for status, atm in _time_steps(obj, meteo):
            compute(obj.models, status, atm, constants, obj)


def process_copy(process, objects, meteo=None, constants=None):
    """与 process_inplace() 相同，但在副本上计算并返回副本。"""
    new = copy_objects(objects)
    process_inplace(process, new, meteo, constants)
    return new


def light_interception_inplace(objects, meteo=None, constants=None):
    """计算光截获，直接修改对象的状态"""
    process_inplace("light_interception", objects, meteo, constants)


def light_interception(objects, meteo=None, constants=None):
    """计算光截获，返回修改后的对象副本"""
    return process_copy("light_interception", objects, meteo, constants)


def energy_balance_inplace(objects, meteo=None, constants=None):
    """计算能量平衡（叶温、感热与潜热通量），直接修改对象的状态。

    能量平衡模型在每次迭代中调用光合作用与气孔导度模型，因此这些过程必须绑定在对象上::

        >>> leaf = ModelList(energy_balance=Monteith(), photosynthesis=Fvcb(),
        ...                  stomatal_conductance=Medlyn(0.03, 12.0),
        ...                  status=dict(Rs=13.747, sky_fraction=1.0, PPFD=1500.0, d=0.03))
        >>> energy_balance_inplace(leaf, Atmosphere(T=20.0, Wind=1.0, P=101.3, Rh=0.65))
        >>> leaf["Tl"]
        [17.6598...]
    """
    process_inplace("energy_balance", objects, meteo, constants)


def energy_balance(objects, meteo=None, constants=None):
    """计算能量平衡，返回修改后的对象副本"""
    return process_copy("energy_balance", objects, meteo, constants)


def photosynthesis_inplace(objects, meteo=None, constants=None):
    """计算光合作用（以及所需的气孔导度），直接修改对象的状态"""
    process_inplace("photosynthesis", objects, meteo, constants)


def photosynthesis(objects, meteo=None, constants=None):
    """计算光合作用，返回修改后的对象副本"""
    return process_copy("photosynthesis", objects, meteo, constants)


def stomatal_conductance_inplace(objects, meteo=None, constants=None):
    """计算气孔导度，直接修改对象的状态"""
    process_inplace("stomatal_conductance", objects, meteo, constants)


def stomatal_conductance(objects, meteo=None, constants=None):
    """计算气孔导度，返回修改后的对象副本"""
    return process_copy("stomatal_conductance", objects, meteo, constants)


def run_inplace(objects, meteo=None, constants=None):
    """按顺序运行对象上绑定的过程。

    先计算光截获，然后计算能量平衡。能量平衡会调用光合作用与气孔导度，
    因此只有在没有能量平衡模型时才单独计算光合作用；两者都没有时才单独计算气孔导度。
    """
    for obj in _as_list(objects):
        models = obj.models
        if models["light_interception"] is not None:
            light_interception_inplace(obj, meteo, constants)
        if models["energy_balance"] is not None:
            energy_balance_inplace(obj, meteo, constants)
        elif models["photosynthesis"] is not None:
            photosynthesis_inplace(obj, meteo, constants)
        elif models["stomatal_conductance"] is not None:
            stomatal_conductance_inplace(obj, meteo, constants)


def run(objects, meteo=None, constants=None):
    """与 run_inplace() 相同，返回修改后的对象副本"""
    new = copy_objects(objects)
    run_inplace(new, meteo, constants)
    return new
