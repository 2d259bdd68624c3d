# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""所有过程模型的基类。

一个模型只保存参数，不保存状态：模拟对象的状态保存在 ModelList 的 Status 中，
同一个模型实例可以被多个模拟对象共享。每个过程有一个抽象基类，过程的计算方法
以过程名命名（例如 `photosynthesis()`），由 `plantbiophysics.processes` 中的调度函数调用。
"""
import logging

from .dispatcher import DispatcherObject
from ..traitlets import HasTraits
from .. import exceptions as exc


class AbstractModel(HasTraits, DispatcherObject):
    """带参数的模型的基类。

    参数以 traits（通常是 Float）的形式定义在子类上。`_parameter_order` 给出位置参数的顺序，
    `_defaults` 给出可省略的参数的默认值::

        >>> class Medlyn(AbstractStomatalConductanceModel):
        ...     g0 = Float()
        ...     g1 = Float()
        ...     gs_min = Float()
        ...     _parameter_order = ["g0", "g1", "gs_min"]
        ...     _defaults = {"gs_min": 0.001}
        ...
        >>> Medlyn(0.03, 12.0).gs_min
        0.001
        >>> Medlyn(0.03)
        Traceback (most recent call last):
        ...
        plantbiophysics.exceptions.ParameterError: Value for parameter g1 missing.

    构造完成后参数不能再修改。
    """

    # 模型所属的过程名
    process = None

    # 模型从 Status 读取和写入的变量
    inputs_ = ()
    outputs_ = ()

    # 模型运行时调用的其他过程，以及是否需要气象数据
    dependencies_ = ()
    meteo_required_ = False

    _parameter_order = []
    _defaults = {}

    def __init__(self, *args, **kwargs):
        HasTraits.__init__(self)

        if len(args) > len(self._parameter_order):
            msg = "%s takes at most %i parameters, got %i." % \
                  (self.__class__.__name__, len(self._parameter_order), len(args))
            raise exc.ParameterError(msg)

        parvalues = dict(self._defaults)
        parvalues.update(zip(self._parameter_order, args))
        for parname, value in kwargs.items():
            if parname not in self._parameter_order:
                msg = "Unknown parameter '%s' for model %s." % (parname, self.__class__.__name__)
                raise exc.ParameterError(msg)
            if parname in self._parameter_order[:len(args)]:
                msg = "Parameter '%s' given both by position and by keyword." % parname
                raise exc.ParameterError(msg)
            parvalues[parname] = value

        for parname in self._parameter_order:
            if parname not in parvalues:
                msg = "Value for parameter %s missing." % parname
                raise exc.ParameterError(msg)
            setattr(self, parname, parvalues[parname])

        self._locked = True

    @property
    def logger(self):
        loggername = "%s.%s" % (self.__class__.__module__,
                                self.__class__.__name__)
        return logging.getLogger(loggername)

    def __setattr__(self, attr, value):
        if attr.startswith("_"):
            HasTraits.__setattr__(self, attr, value)
        elif getattr(self, "_locked", False):
            msg = "Parameter '%s' of %s cannot be changed after construction." % \
                  (attr, self.__class__.__name__)
            raise AttributeError(msg)
        elif hasattr(self, attr):
            HasTraits.__setattr__(self, attr, value)
        else:
            # 阻止对不存在的属性赋值
            msg = "Assignment to non-existing attribute '%s' prevented." % attr
            raise AttributeError(msg)

    def parameters(self):
        """返回参数名到参数值的字典。"""
        return {parname: getattr(self, parname) for parname in self._parameter_order}

    def __repr__(self):
        pars = ", ".join("%s=%s" % (k, v) for k, v in self.parameters().items())
        return "%s(%s)" % (self.__class__.__name__, pars)


class AbstractLightInterceptionModel(AbstractModel):
    """光截获模型的基类"""
    process = "light_interception"

    def light_interception(self, models, status, meteo, constants, obj=None):
        msg = "`light_interception` method not yet implemented on %s" % self.__class__.__name__
        raise NotImplementedError(msg)


class AbstractEnergyBalanceModel(AbstractModel):
    """能量平衡模型的基类"""
    process = "energy_balance"

    def energy_balance(self, models, status, meteo, constants, obj=None):
        msg = "`energy_balance` method not yet implemented on %s" % self.__class__.__name__
        raise NotImplementedError(msg)


class AbstractPhotosynthesisModel(AbstractModel):
    """光合作用模型的基类"""
    process = "photosynthesis"

    def photosynthesis(self, models, status, meteo, constants, obj=None):
        msg = "`photosynthesis` method not yet implemented on %s" % self.__class__.__name__
        raise NotImplementedError(msg)


class AbstractStomatalConductanceModel(AbstractModel):
    """气孔导度模型的基类

    子类实现 `gs_closure()`，即 Gs 对 A 的响应斜率，`gs()` 由所有子类共享。
    """
    process = "stomatal_conductance"

    def gs_closure(self, models, status, meteo):
        msg = "`gs_closure` method not yet implemented on %s" % self.__class__.__name__
        raise NotImplementedError(msg)

    def gs(self, closure, A):
        """Gs = max(gs_min, g0 + closure·A)"""
        return max(self.gs_min, self.g0 + closure * A)

    def stomatal_conductance(self, models, status, meteo, constants, obj=None):
        status.Gs = self.gs(self.gs_closure(models, status, meteo), status.A)


# 过程名到抽象模型类的映射，同时给出 ModelList 中过程的顺序
PROCESSES = {"light_interception": AbstractLightInterceptionModel,
             "energy_balance": AbstractEnergyBalanceModel,
             "photosynthesis": AbstractPhotosynthesisModel,
             "stomatal_conductance": AbstractStomatalConductanceModel}
