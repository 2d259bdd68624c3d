# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""plantbiophysics 的基础类：气象、变量注册、状态、模型基类与模拟对象。
"""
from .dispatcher import DispatcherObject
from .weather import Atmosphere, Weather
from .variables import (UNINITIALIZED, inputs, outputs, variables, to_initialize,
                        init_variables, init_variables_manual)
from .status import Status, init_status, is_initialized, uninitialized_variables
from .timesteptable import TimeStepTable, homogeneous_type_steps
from .models import (AbstractModel, AbstractLightInterceptionModel, AbstractEnergyBalanceModel,
                     AbstractPhotosynthesisModel, AbstractStomatalConductanceModel, PROCESSES)
from .modellist import ModelList, check_initialization
