# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""plantbiophysics 的异常层次结构
"""

class PlantBiophysicsError(Exception):
    """plantbiophysics 的顶级异常"""

class ConfigurationError(PlantBiophysicsError):
    "Raised when the models or the status of an object are not configured correctly."

class UnknownVariableError(ConfigurationError):
    "Raised when a variable name is not declared by any of the models."

class InitializationError(ConfigurationError):
    "Raised when variables are left uninitialized and strict initialization is required."

class ParameterError(PlantBiophysicsError):
    "Raised when problems with model parameters are found."

class MeteoRangeError(PlantBiophysicsError):
    "Raised when a meteorological variable is outside its allowed range."

class NumericalNonConvergence(PlantBiophysicsError):
    "Raised when an iterative solver is required to converge but did not."

class InitializationWarning(UserWarning):
    "Issued when a simulation starts with variables still at their uninitialized value."
