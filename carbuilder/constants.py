"""
    Copyright 2018 EPAM Systems, Inc.

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.
"""
OK_RETURN_CODE = 0
FAILED_RETURN_CODE = 1

# ENV VARS ====================================================================
DEBUG_ENV_NAME = 'CARBUILDER_DEBUG'
LOGS_ENV_NAME = 'CARBUILDER_LOGS'

# PROFILES ====================================================================
SPORTS_CAR_PROFILE = 'sports_car'
SUV_PROFILE = 'suv'

PROFILE_DESCRIPTIONS = {
    SPORTS_CAR_PROFILE: 'Two seats, sport engine, trip computer and GPS.',
    SUV_PROFILE: 'Not defined yet, produces an empty product.'
}

# PRODUCTS ====================================================================
CAR_PRODUCT = 'car'
MANUAL_PRODUCT = 'manual'
ALL_PRODUCTS = 'all'

# ACTIONS =====================================================================
MAKE_ACTION = 'make'
PROFILES_ACTION = 'profiles'
