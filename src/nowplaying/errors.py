# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-2.0


##########################################################################################
# Imports
##########################################################################################

from enum import IntEnum, unique


##########################################################################################
# Enumerator definitions
##########################################################################################

@unique
class ControllerErrorType(IntEnum):
    '''
    Controller error type enumerator.

    Launch    - the controller binary could not be executed
    Decode    - the controller output is not valid text
    Malformed - the controller returned a value outside the known vocabulary
    '''

    Launch    = 0
    Decode    = 1
    Malformed = 2


##########################################################################################
# Class definitions
##########################################################################################

class ControllerException(Exception):
    def __init__(self, type: ControllerErrorType, detail: str):
        super().__init__(f'{type.name}: {detail}')

        self._type = type
        self._detail = detail

    def get_type(self) -> ControllerErrorType:
        return self._type

    def get_detail(self) -> str:
        return self._detail
