# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""用于描述模拟驱动气象条件的类。

`Atmosphere` 保存一个时间步的气象数据及其派生量，`Weather` 是按时间顺序排列的
Atmosphere 记录序列并附带元数据。
"""
import logging
import datetime as dt

import pandas as pd

from .. import exceptions as exc
from ..settings import settings
from ..util import (e_sat, e_sat_slope, vapor_pressure, air_density, latent_heat_vaporization,
                    psychrometer_constant, atmosphere_emissivity, limit, DotMap)


class SlotPickleMixin(object):
    """该mixin使得定义了__slots__的对象可以被pickle/反pickle。

    摘录自：
    http://code.activestate.com/recipes/578433-mixin-for-pickling-objects-with-__slots__/
    """

    def __getstate__(self):
        return dict(
            (slot, getattr(self, slot))
            for slot in self.__slots__
            if hasattr(self, slot)
        )

    def __setstate__(self, state):
        for slot, value in state.items():
            object.__setattr__(self, slot, value)


class Atmosphere(SlotPickleMixin):
    """用于存储一个时间步的气象数据的类。

    气象数据通过关键字参数提供，这些关键字也是在 Atmosphere 中访问变量的属性名。

    以下关键字是必需的：

    :keyword T: 气温（°C）
    :keyword Wind: 风速（m s-1）
    :keyword Rh: 相对湿度（0-1）

    以下关键字是可选的：

    :keyword P: 气压（kPa），默认 101.325，即海平面平均气压
    :keyword Ca: 大气 CO2 浓度（ppm），默认 400.0
    :keyword date: 观测时间（datetime），默认为当前时间
    :keyword duration: 时间步长（s），默认 1.0
    :keyword clearness: 天空晴朗度（0-1），默认 9999.9（未知）
    :keyword Ri_SW_f: 入射短波辐射通量（W m-2），默认 9999.9
    :keyword Ri_PAR_f: 入射 PAR 通量（W m-2），默认 9999.9
    :keyword Ri_NIR_f: 入射近红外通量（W m-2），默认 9999.9
    :keyword Ri_TIR_f: 入射热红外通量（W m-2），默认 9999.9
    :keyword Ri_custom_f: 自定义波段的入射辐射通量（W m-2），默认 9999.9

    派生变量在构造时计算一次，也可以直接给出：

    :keyword e: 水汽压（kPa）
    :keyword es: 饱和水汽压（kPa）
    :keyword VPD: 饱和差（kPa）
    :keyword rho: 空气密度（kg m-3）
    :keyword lambda_v: 汽化潜热（J kg-1）
    :keyword gamma: 干湿表常数（kPa K-1）
    :keyword epsilon: 大气发射率（0-1）
    :keyword delta: 饱和水汽压曲线的斜率（kPa K-1）

    Wind <= 0 会被强制设为 1e-6，1 < Rh <= 100 被视为百分数并除以 100，其余超出 (0, 1] 的 Rh
    被截断到 [1e-6, 1]。这些修正只会产生警告。构造完成后 Atmosphere 不可修改。

    示例::

        >>> from plantbiophysics import Atmosphere
        >>> meteo = Atmosphere(T=20.0, Wind=1.0, P=101.3, Rh=0.65)
        >>> round(meteo.VPD, 4)
        0.8215
    """
    required = ["T", "Wind", "Rh"]
    optional = ["P", "Ca", "clearness", "Ri_SW_f", "Ri_PAR_f", "Ri_NIR_f", "Ri_TIR_f",
                "Ri_custom_f"]
    derived = ["e", "es", "VPD", "rho", "lambda_v", "gamma", "epsilon", "delta"]
    __slots__ = ["date", "duration"] + required + optional + derived

    defaults = {"P": 101.325, "Ca": 400.0, "clearness": 9999.9, "Ri_SW_f": 9999.9,
                "Ri_PAR_f": 9999.9, "Ri_NIR_f": 9999.9, "Ri_TIR_f": 9999.9,
                "Ri_custom_f": 9999.9}

    units = {"T": "Celsius", "Wind": "m/s", "Rh": "0-1", "P": "kPa", "Ca": "ppm",
             "clearness": "0-1", "Ri_SW_f": "W/m2", "Ri_PAR_f": "W/m2", "Ri_NIR_f": "W/m2",
             "Ri_TIR_f": "W/m2", "Ri_custom_f": "W/m2", "e": "kPa", "es": "kPa",
             "VPD": "kPa", "rho": "kg/m3", "lambda_v": "J/kg", "gamma": "kPa/K",
             "epsilon": "0-1", "delta": "kPa/K"}

    def __init__(self, *args, **kwargs):

        # 仅应使用关键字参数初始化气象数据
        if len(args) > 0:
            msg = ("Atmosphere should be initialized by providing weather " +
                   "variables through keywords only. Got '%s' instead.")
            raise exc.PlantBiophysicsError(msg % (args,))

        self._set("date", kwargs.pop("date", None) or dt.datetime.now())
        self._set("duration", float(kwargs.pop("duration", 1.0)))

        # 遍历必需参数，检查是否全部提供
        values = {}
        for varname in self.required:
            if varname not in kwargs:
                msg = "Weather attribute '%s' missing when building Atmosphere."
                raise exc.PlantBiophysicsError(msg % varname)
            values[varname] = self._as_float(varname, kwargs.pop(varname))

        for varname in self.optional:
            values[varname] = self._as_float(varname, kwargs.pop(varname, self.defaults[varname]))

        values["Wind"], values["Rh"] = self._check_wind_rh(values["Wind"], values["Rh"])
        self._check_clearness(values["clearness"])

        for varname, value in values.items():
            self._set(varname, value)

        # 派生变量：如果用户提供了，则直接使用
        T, P, Rh = self.T, self.P, self.Rh
        derived = {}
        derived["e"] = kwargs.pop("e", None)
        if derived["e"] is None:
            derived["e"] = vapor_pressure(T, Rh)
        derived["es"] = kwargs.pop("es", None)
        if derived["es"] is None:
            derived["es"] = e_sat(T)
        derived["VPD"] = kwargs.pop("VPD", None)
        if derived["VPD"] is None:
            derived["VPD"] = derived["es"] - derived["e"]
        derived["rho"] = kwargs.pop("rho", None)
        if derived["rho"] is None:
            derived["rho"] = air_density(T, P)
        derived["lambda_v"] = kwargs.pop("lambda_v", None)
        if derived["lambda_v"] is None:
            derived["lambda_v"] = latent_heat_vaporization(T)
        derived["gamma"] = kwargs.pop("gamma", None)
        if derived["gamma"] is None:
            derived["gamma"] = psychrometer_constant(P, derived["lambda_v"])
        derived["epsilon"] = kwargs.pop("epsilon", None)
        if derived["epsilon"] is None:
            derived["epsilon"] = atmosphere_emissivity(T, derived["e"])
        derived["delta"] = kwargs.pop("delta", None)
        if derived["delta"] is None:
            derived["delta"] = e_sat_slope(T)

        for varname in self.derived:
            self._set(varname, self._as_float(varname, derived[varname]))

        # 检查是否还有剩余未知参数
        if len(kwargs) > 0:
            msg = "Atmosphere: unknown keywords '%s' are ignored!"
            logging.warning(msg, list(kwargs.keys()))

    @staticmethod
    def _as_float(varname, value):
        try:
            return float(value)
        except (ValueError, TypeError):
            msg = "Weather attribute '%s' has an invalid numerical value: %s"
            raise exc.PlantBiophysicsError(msg % (varname, value))

    @staticmethod
    def _check_wind_rh(wind, rh):
        if wind <= 0:
            logging.warning("Wind should always be > 0, forcing it to 1e-6")
            wind = 1e-6

        if 1.0 < rh <= 100.0:
            logging.warning("Rh should be 0 < Rh <= 1, assuming it is given in %% and "
                            "dividing by 100")
            rh /= 100.

        if rh <= 0.0 or rh > 1.0:
            logging.warning("Rh should be 0 < Rh <= 1, and its value is %s, clamping it to "
                            "(1e-6, 1]", rh)
            rh = limit(1e-6, 1.0, rh)
        return wind, rh

    @staticmethod
    def _check_clearness(clearness):
        if clearness != 9999.9 and (clearness <= 0 or clearness > 1):
            msg = "clearness should always be 0 < clearness <= 1, and its value is %s" % clearness
            if settings.METEO_RANGE_CHECKS:
                raise exc.MeteoRangeError(msg)
            logging.error(msg)

    def _set(self, key, value):
        object.__setattr__(self, key, value)

    def __setattr__(self, key, value):
        msg = "Atmosphere is immutable, cannot set '%s'." % key
        raise AttributeError(msg)

    def __delattr__(self, key):
        msg = "Atmosphere is immutable, cannot delete '%s'." % key
        raise AttributeError(msg)

    def __eq__(self, other):
        if not isinstance(other, Atmosphere):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    __hash__ = None

    def __str__(self):
        msg = "Atmosphere for %s (duration: %s s)\n" % (self.date, self.duration)
        for v in self.required + self.optional + self.derived:
            value = getattr(self, v)
            msg += "%12s: %14.4f %6s\n" % (v, value, self.units[v])
        return msg

    def __repr__(self):
        return "Atmosphere(T=%s, Wind=%s, P=%s, Rh=%s, Ca=%s)" % \
               (self.T, self.Wind, self.P, self.Rh, self.Ca)

    def as_dict(self):
        """以字典形式返回 Atmosphere 的全部变量。"""
        return {key: getattr(self, key) for key in self.__slots__}


class Weather(object):
    """按时间步排列的 Atmosphere 记录序列，附带自由格式的元数据。

    :param data: Atmosphere 实例的序列
    :param metadata: 元数据（dict 或 DotMap），可选

    Weather 不可修改。整数索引返回对应时间步的 Atmosphere，字符串索引返回
    该变量在所有时间步上的值列表。

    示例::

        >>> from plantbiophysics import Atmosphere, Weather
        >>> w = Weather([Atmosphere(T=20.0, Wind=1.0, P=101.3, Rh=0.65),
        ...              Atmosphere(T=23.0, Wind=1.5, P=101.3, Rh=0.60),
        ...              Atmosphere(T=25.0, Wind=3.0, P=101.3, Rh=0.55)],
        ...             {"site": "Test site"})
        >>> w["T"]
        [20.0, 23.0, 25.0]
        >>> w.metadata.site
        'Test site'
    """

    def __init__(self, data, metadata=None):
        data = tuple(data)
        for i, atm in enumerate(data):
            if not isinstance(atm, Atmosphere):
                msg = "Weather data should only hold Atmosphere records, found %s at step %i."
                raise exc.PlantBiophysicsError(msg % (type(atm).__name__, i))
        self._data = data
        self._metadata = DotMap(metadata if metadata is not None else {})

    @property
    def logger(self):
        loggername = "%s.%s" % (self.__class__.__module__,
                                self.__class__.__name__)
        return logging.getLogger(loggername)

    @property
    def data(self):
        return self._data

    @property
    def metadata(self):
        return self._metadata

    @classmethod
    def from_records(cls, records, metadata=None):
        """由字典的序列（每个时间步一条记录）构建 Weather。"""
        return cls([Atmosphere(**r) for r in records], metadata)

    @classmethod
    def from_dataframe(cls, df, metadata=None):
        """由 pandas DataFrame 构建 Weather。

        每一行是一个时间步的观测，列名必须与 Atmosphere 的关键字完全一致。
        """
        records = df.to_dict(orient="records")
        w = cls.from_records(records, metadata)
        w.logger.debug("Built Weather with %i time-steps from a DataFrame." % len(w))
        return w

    def export(self):
        """将 Weather 的内容以字典列表导出。"""
        return [atm.as_dict() for atm in self._data]

    def to_dataframe(self):
        """将 Weather 转换为 pandas DataFrame，每个时间步一行。"""
        return pd.DataFrame(self.export(), columns=Atmosphere.__slots__)

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __getitem__(self, item):
        if isinstance(item, str):
            if item not in Atmosphere.__slots__:
                msg = "Unknown weather variable '%s'." % item
                raise KeyError(msg)
            return [getattr(atm, item) for atm in self._data]
        return self._data[item]

    def __str__(self):
        msg = "Weather data with %i time-steps\n" % len(self)
        msg += "Metadata: %s\n" % self._metadata.toDict()
        if len(self) > 0:
            msg += "Data available for %s - %s\n" % (self._data[0].date, self._data[-1].date)
        return msg
