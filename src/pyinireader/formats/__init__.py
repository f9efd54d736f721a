# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 01:02:16

from .inifile import IniFileHandler
from .yamldoc import IniYamlHandler, InvalidYamlDocument

__all__ = ['IniFileHandler', 'IniYamlHandler', 'InvalidYamlDocument']
