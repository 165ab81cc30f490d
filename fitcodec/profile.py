# fitcodec
#
# Copyright (c) 2018 Jean-Charles Lefebvre
# All rights reserved.
#
# This code is licensed under the MIT License.
# See the LICENSE.txt file at the root of this project.
#
# ****WARNING****  This file is auto-generated!  Do NOT edit this file.
# Generated by scripts/generate_profile.py from Profile.xls
# Profile Version = 21.94

from .types import (
    BASE_TYPES, FieldType, MessageType, Field, SubField, ComponentField,
    ReferenceField)

__all__ = []


PROFILE_VERSION = 2194  # 21.94

FIELD_TYPES = {
    'activity': FieldType(name='activity', base_type=BASE_TYPES[0x00], values={
        0: 'manual',
        1: 'auto_multi_sport',
    }),
    'activity_type': FieldType(name='activity_type', base_type=BASE_TYPES[0x00], values={
        0: 'generic',
        1: 'running',
        2: 'cycling',
        3: 'transition',
        4: 'fitness_equipment',
        5: 'swimming',
        6: 'walking',
        8: 'sedentary',
        254: 'all',
    }),
    'antplus_device_type': FieldType(name='antplus_device_type', base_type=BASE_TYPES[0x02], values={
        1: 'antfs',
        11: 'bike_power',
        12: 'environment_sensor_legacy',
        15: 'multi_sport_speed_distance',
        16: 'control',
        17: 'fitness_equipment',
        18: 'blood_pressure',
        19: 'geocache_node',
        20: 'light_electric_vehicle',
        25: 'env_sensor',
        26: 'racquet',
        27: 'control_hub',
        31: 'muscle_oxygen',
        34: 'shifting',
        35: 'bike_light_main',
        36: 'bike_light_shared',
        38: 'exd',
        40: 'bike_radar',
        46: 'bike_aero',
        119: 'weight_scale',
        120: 'heart_rate',
        121: 'bike_speed_cadence',
        122: 'bike_cadence',
        123: 'bike_speed',
        124: 'stride_speed_distance',
    }),
    'battery_status': FieldType(name='battery_status', base_type=BASE_TYPES[0x02], values={
        1: 'new',
        2: 'good',
        3: 'ok',
        4: 'low',
        5: 'critical',
        6: 'charging',
        7: 'unknown',
    }),
    'bool': FieldType(name='bool', base_type=BASE_TYPES[0x00]),
    'date_time': FieldType(name='date_time', base_type=BASE_TYPES[0x86], values={
        0x10000000: 'min',
    }),
    'device_index': FieldType(name='device_index', base_type=BASE_TYPES[0x02], values={
        0: 'creator',
    }),
    'display_heart': FieldType(name='display_heart', base_type=BASE_TYPES[0x00], values={
        0: 'bpm',
        1: 'max',
        2: 'reserve',
    }),
    'display_measure': FieldType(name='display_measure', base_type=BASE_TYPES[0x00], values={
        0: 'metric',
        1: 'statute',
        2: 'nautical',
    }),
    'display_power': FieldType(name='display_power', base_type=BASE_TYPES[0x00], values={
        0: 'watts',
        1: 'percent_ftp',
    }),
    'dive_alarm_type': FieldType(name='dive_alarm_type', base_type=BASE_TYPES[0x00], values={
        0: 'depth',
        1: 'time',
        2: 'speed',
    }),
    'dive_gas_status': FieldType(name='dive_gas_status', base_type=BASE_TYPES[0x00], values={
        0: 'disabled',
        1: 'enabled',
        2: 'backup_only',
    }),
    'event': FieldType(name='event', base_type=BASE_TYPES[0x00], values={
        0: 'timer',
        3: 'workout',
        4: 'workout_step',
        5: 'power_down',
        6: 'power_up',
        7: 'off_course',
        8: 'session',
        9: 'lap',
        10: 'course_point',
        11: 'battery',
        12: 'virtual_partner_pace',
        13: 'hr_high_alert',
        14: 'hr_low_alert',
        15: 'speed_high_alert',
        16: 'speed_low_alert',
        17: 'cad_high_alert',
        18: 'cad_low_alert',
        19: 'power_high_alert',
        20: 'power_low_alert',
        21: 'recovery_hr',
        22: 'battery_low',
        23: 'time_duration_alert',
        24: 'distance_duration_alert',
        25: 'calorie_duration_alert',
        26: 'activity',
        27: 'fitness_equipment',
        28: 'length',
        32: 'user_marker',
        33: 'sport_point',
        36: 'calibration',
        42: 'front_gear_change',
        43: 'rear_gear_change',
        44: 'rider_position_change',
        45: 'elev_high_alert',
        46: 'elev_low_alert',
        47: 'comm_timeout',
    }),
    'event_type': FieldType(name='event_type', base_type=BASE_TYPES[0x00], values={
        0: 'start',
        1: 'stop',
        2: 'consecutive_depreciated',
        3: 'marker',
        4: 'stop_all',
        5: 'begin_depreciated',
        6: 'end_depreciated',
        7: 'end_all_depreciated',
        8: 'stop_disable',
        9: 'stop_disable_all',
    }),
    'file': FieldType(name='file', base_type=BASE_TYPES[0x00], values={
        1: 'device',
        2: 'settings',
        3: 'sport',
        4: 'activity',
        5: 'workout',
        6: 'course',
        7: 'schedules',
        9: 'weight',
        10: 'totals',
        11: 'goals',
        14: 'blood_pressure',
        15: 'monitoring_a',
        20: 'activity_summary',
        28: 'monitoring_daily',
        32: 'monitoring_b',
        34: 'segment',
        35: 'segment_list',
        40: 'exd_configuration',
        0xF7: 'mfg_range_min',
        0xFE: 'mfg_range_max',
    }),
    'fit_base_type': FieldType(name='fit_base_type', base_type=BASE_TYPES[0x02], values={
        0: 'enum',
        1: 'sint8',
        2: 'uint8',
        7: 'string',
        10: 'uint8z',
        13: 'byte',
        131: 'sint16',
        132: 'uint16',
        133: 'sint32',
        134: 'uint32',
        136: 'float32',
        137: 'float64',
        139: 'uint16z',
        140: 'uint32z',
        142: 'sint64',
        143: 'uint64',
        144: 'uint64z',
    }),
    'fitness_equipment_state': FieldType(name='fitness_equipment_state', base_type=BASE_TYPES[0x00], values={
        0: 'ready',
        1: 'in_use',
        2: 'paused',
        3: 'unknown',
    }),
    'garmin_product': FieldType(name='garmin_product', base_type=BASE_TYPES[0x84], values={
        1: 'hrm1',
        2: 'axh01',
        3: 'axb01',
        4: 'axb02',
        5: 'hrm2ss',
        6: 'dsi_alf02',
        717: 'fr405',
        782: 'fr50',
        988: 'fr60',
        1018: 'fr310xt',
        1036: 'edge500',
        1124: 'fr110',
        1169: 'edge800',
        1325: 'edge200',
        1328: 'fr910xt',
        1561: 'edge510',
        1567: 'edge810',
        65534: 'connect',
    }),
    'gender': FieldType(name='gender', base_type=BASE_TYPES[0x00], values={
        0: 'female',
        1: 'male',
    }),
    'hr_zone_calc': FieldType(name='hr_zone_calc', base_type=BASE_TYPES[0x00], values={
        0: 'custom',
        1: 'percent_max_hr',
        2: 'percent_hrr',
    }),
    'intensity': FieldType(name='intensity', base_type=BASE_TYPES[0x00], values={
        0: 'active',
        1: 'rest',
        2: 'warmup',
        3: 'cooldown',
    }),
    'language': FieldType(name='language', base_type=BASE_TYPES[0x00], values={
        0: 'english',
        1: 'french',
        2: 'italian',
        3: 'german',
        4: 'spanish',
        5: 'croatian',
        6: 'czech',
        7: 'danish',
        8: 'dutch',
        9: 'finnish',
        10: 'greek',
        11: 'hungarian',
        12: 'norwegian',
        13: 'polish',
        14: 'portuguese',
        15: 'slovakian',
        16: 'slovenian',
        17: 'swedish',
        18: 'russian',
        19: 'turkish',
        20: 'latvian',
        21: 'ukrainian',
        22: 'arabic',
        23: 'farsi',
        24: 'bulgarian',
        25: 'romanian',
        26: 'chinese',
        27: 'japanese',
        28: 'korean',
        29: 'taiwanese',
        30: 'thai',
        31: 'hebrew',
        32: 'brazilian_portuguese',
        33: 'indonesian',
        34: 'malaysian',
        35: 'vietnamese',
        36: 'burmese',
        37: 'mongolian',
        254: 'custom',
    }),
    'lap_trigger': FieldType(name='lap_trigger', base_type=BASE_TYPES[0x00], values={
        0: 'manual',
        1: 'time',
        2: 'distance',
        3: 'position_start',
        4: 'position_lap',
        5: 'position_waypoint',
        6: 'position_marked',
        7: 'session_end',
        8: 'fitness_equipment',
    }),
    'left_right_balance': FieldType(name='left_right_balance', base_type=BASE_TYPES[0x02], values={
        0x7F: 'mask',
        0x80: 'right',
    }),
    'local_date_time': FieldType(name='local_date_time', base_type=BASE_TYPES[0x86], values={
        0x10000000: 'min',
    }),
    'manufacturer': FieldType(name='manufacturer', base_type=BASE_TYPES[0x84], values={
        1: 'garmin',
        2: 'garmin_fr405_antfs',
        3: 'zephyr',
        4: 'dayton',
        5: 'idt',
        6: 'srm',
        7: 'quarq',
        8: 'ibike',
        9: 'saris',
        10: 'spark_hk',
        11: 'tanita',
        12: 'echowell',
        13: 'dynastream_oem',
        14: 'nautilus',
        15: 'dynastream',
        16: 'timex',
        17: 'metrigear',
        18: 'xelic',
        19: 'beurer',
        20: 'cardiosport',
        21: 'a_and_d',
        22: 'hmm',
        23: 'suunto',
        24: 'thita_elektronik',
        25: 'gpulse',
        26: 'clean_mobile',
        27: 'pedal_brain',
        28: 'peaksware',
        29: 'saxonar',
        30: 'lemond_fitness',
        31: 'dexcom',
        32: 'wahoo_fitness',
        33: 'octane_fitness',
        34: 'archinoetics',
        35: 'the_hurt_box',
        36: 'citizen_systems',
        37: 'magellan',
        38: 'osynce',
        39: 'holux',
        40: 'concept2',
        89: 'tacx',
        255: 'development',
        260: 'zwift',
    }),
    'mesg_num': FieldType(name='mesg_num', base_type=BASE_TYPES[0x84], values={
        0: 'file_id',
        1: 'capabilities',
        2: 'device_settings',
        3: 'user_profile',
        4: 'hrm_profile',
        5: 'sdm_profile',
        6: 'bike_profile',
        7: 'zones_target',
        8: 'hr_zone',
        9: 'power_zone',
        10: 'met_zone',
        12: 'sport',
        15: 'goal',
        18: 'session',
        19: 'lap',
        20: 'record',
        21: 'event',
        23: 'device_info',
        26: 'workout',
        27: 'workout_step',
        28: 'schedule',
        30: 'weight_scale',
        31: 'course',
        32: 'course_point',
        33: 'totals',
        34: 'activity',
        35: 'software',
        37: 'file_capabilities',
        38: 'mesg_capabilities',
        39: 'field_capabilities',
        49: 'file_creator',
        51: 'blood_pressure',
        53: 'speed_zone',
        55: 'monitoring',
        72: 'training_file',
        78: 'hrv',
        101: 'length',
        103: 'monitoring_info',
        105: 'pad',
        106: 'slave_device',
        132: 'hr',
        206: 'field_description',
        207: 'developer_data_id',
        258: 'dive_settings',
        259: 'dive_gas',
        262: 'dive_alarm',
        268: 'dive_summary',
        0xFF00: 'mfg_range_min',
        0xFFFE: 'mfg_range_max',
    }),
    'message_index': FieldType(name='message_index', base_type=BASE_TYPES[0x84], values={
        0x0FFF: 'mask',
        0x7000: 'reserved',
        0x8000: 'selected',
    }),
    'pwr_zone_calc': FieldType(name='pwr_zone_calc', base_type=BASE_TYPES[0x00], values={
        0: 'custom',
        1: 'percent_ftp',
    }),
    'session_trigger': FieldType(name='session_trigger', base_type=BASE_TYPES[0x00], values={
        0: 'activity_end',
        1: 'manual',
        2: 'auto_multi_sport',
        3: 'fitness_equipment',
    }),
    'source_type': FieldType(name='source_type', base_type=BASE_TYPES[0x00], values={
        0: 'ant',
        1: 'antplus',
        2: 'bluetooth',
        3: 'bluetooth_low_energy',
        4: 'wifi',
        5: 'local',
    }),
    'sport': FieldType(name='sport', base_type=BASE_TYPES[0x00], values={
        0: 'generic',
        1: 'running',
        2: 'cycling',
        3: 'transition',
        4: 'fitness_equipment',
        5: 'swimming',
        6: 'basketball',
        7: 'soccer',
        8: 'tennis',
        9: 'american_football',
        10: 'training',
        11: 'walking',
        12: 'cross_country_skiing',
        13: 'alpine_skiing',
        14: 'snowboarding',
        15: 'rowing',
        16: 'mountaineering',
        17: 'hiking',
        18: 'multisport',
        19: 'paddling',
        20: 'flying',
        21: 'e_biking',
        22: 'motorcycling',
        23: 'boating',
        24: 'driving',
        25: 'golf',
        26: 'hang_gliding',
        27: 'horseback_riding',
        28: 'hunting',
        29: 'fishing',
        30: 'inline_skating',
        31: 'rock_climbing',
        32: 'sailing',
        33: 'ice_skating',
        34: 'sky_diving',
        35: 'snowshoeing',
        36: 'snowmobiling',
        37: 'stand_up_paddleboarding',
        38: 'surfing',
        39: 'wakeboarding',
        40: 'water_skiing',
        41: 'kayaking',
        42: 'rafting',
        43: 'windsurfing',
        44: 'kitesurfing',
        45: 'tactical',
        46: 'jumpmaster',
        47: 'boxing',
        48: 'floor_climbing',
        53: 'diving',
        254: 'all',
    }),
    'sub_sport': FieldType(name='sub_sport', base_type=BASE_TYPES[0x00], values={
        0: 'generic',
        1: 'treadmill',
        2: 'street',
        3: 'trail',
        4: 'track',
        5: 'spin',
        6: 'indoor_cycling',
        7: 'road',
        8: 'mountain',
        9: 'downhill',
        10: 'recumbent',
        11: 'cyclocross',
        12: 'hand_cycling',
        13: 'track_cycling',
        14: 'indoor_rowing',
        15: 'elliptical',
        16: 'stair_climbing',
        17: 'lap_swimming',
        18: 'open_water',
        19: 'flexibility_training',
        20: 'strength_training',
        21: 'warm_up',
        22: 'match',
        23: 'exercise',
        24: 'challenge',
        25: 'indoor_skiing',
        26: 'cardio_training',
        27: 'indoor_walking',
        28: 'e_bike_fitness',
        29: 'bmx',
        30: 'casual_walking',
        31: 'speed_walking',
        32: 'bike_to_run_transition',
        33: 'run_to_bike_transition',
        34: 'swim_to_bike_transition',
        35: 'atv',
        36: 'motocross',
        37: 'backcountry',
        38: 'resort',
        39: 'rc_drone',
        40: 'wingsuit',
        41: 'whitewater',
        42: 'skate_skiing',
        43: 'yoga',
        44: 'pilates',
        45: 'indoor_running',
        46: 'gravel_cycling',
        47: 'e_bike_mountain',
        48: 'commuting',
        49: 'mixed_surface',
        50: 'navigate',
        51: 'track_me',
        52: 'map',
        53: 'single_gas_diving',
        54: 'multi_gas_diving',
        55: 'gauge_diving',
        56: 'apnea_diving',
        57: 'apnea_hunting',
        58: 'virtual_activity',
        59: 'obstacle',
        254: 'all',
    }),
    'timer_trigger': FieldType(name='timer_trigger', base_type=BASE_TYPES[0x00], values={
        0: 'manual',
        1: 'auto',
        2: 'fitness_equipment',
    }),
    'tissue_model_type': FieldType(name='tissue_model_type', base_type=BASE_TYPES[0x00], values={
        0: 'zhl_16c',
    }),
    'tone': FieldType(name='tone', base_type=BASE_TYPES[0x00], values={
        0: 'off',
        1: 'tone',
        2: 'vibrate',
        3: 'tone_and_vibrate',
    }),
    'water_type': FieldType(name='water_type', base_type=BASE_TYPES[0x00], values={
        0: 'fresh',
        1: 'salt',
        2: 'en13319',
        3: 'custom',
    }),
}

MESSAGE_TYPES = {
    # ################################ file_id (0) ################################
    0: MessageType(name='file_id', mesg_num=0, fields={
        0: Field(name='type', type=FIELD_TYPES['file'], def_num=0),
        1: Field(name='manufacturer', type=FIELD_TYPES['manufacturer'], def_num=1),
        2: Field(name='product', type=BASE_TYPES[0x84], def_num=2, subfields=(
            SubField(name='garmin_product', def_num=2, type=FIELD_TYPES['garmin_product'], ref_fields=(
                ReferenceField(name='manufacturer', def_num=1, value='garmin', raw_value=1),
                ReferenceField(name='manufacturer', def_num=1, value='dynastream', raw_value=15),
                ReferenceField(name='manufacturer', def_num=1, value='dynastream_oem', raw_value=13),
                ReferenceField(name='manufacturer', def_num=1, value='tacx', raw_value=89),
            )),
        )),
        3: Field(name='serial_number', type=BASE_TYPES[0x8C], def_num=3),
        4: Field(name='time_created', type=FIELD_TYPES['date_time'], def_num=4),
        5: Field(name='number', type=BASE_TYPES[0x84], def_num=5),
        8: Field(name='product_name', type=BASE_TYPES[0x07], def_num=8),
    }),

    # ################################ user_profile (3) ################################
    3: MessageType(name='user_profile', mesg_num=3, fields={
        0: Field(name='friendly_name', type=BASE_TYPES[0x07], def_num=0),
        1: Field(name='gender', type=FIELD_TYPES['gender'], def_num=1),
        2: Field(name='age', type=BASE_TYPES[0x02], def_num=2, units='years'),
        3: Field(name='height', type=BASE_TYPES[0x02], def_num=3, scale=100, units='m'),
        4: Field(name='weight', type=BASE_TYPES[0x84], def_num=4, scale=10, units='kg'),
        5: Field(name='language', type=FIELD_TYPES['language'], def_num=5),
        6: Field(name='elev_setting', type=FIELD_TYPES['display_measure'], def_num=6),
        7: Field(name='weight_setting', type=FIELD_TYPES['display_measure'], def_num=7),
        8: Field(name='resting_heart_rate', type=BASE_TYPES[0x02], def_num=8, units='bpm'),
        9: Field(name='default_max_running_heart_rate', type=BASE_TYPES[0x02], def_num=9, units='bpm'),
        10: Field(name='default_max_biking_heart_rate', type=BASE_TYPES[0x02], def_num=10, units='bpm'),
        11: Field(name='default_max_heart_rate', type=BASE_TYPES[0x02], def_num=11, units='bpm'),
        12: Field(name='hr_setting', type=FIELD_TYPES['display_heart'], def_num=12),
        13: Field(name='speed_setting', type=FIELD_TYPES['display_measure'], def_num=13),
        14: Field(name='dist_setting', type=FIELD_TYPES['display_measure'], def_num=14),
        16: Field(name='power_setting', type=FIELD_TYPES['display_power'], def_num=16),
        254: Field(name='message_index', type=FIELD_TYPES['message_index'], def_num=254),
    }),

    # ################################ hrm_profile (4) ################################
    4: MessageType(name='hrm_profile', mesg_num=4, fields={
        0: Field(name='enabled', type=FIELD_TYPES['bool'], def_num=0),
        1: Field(name='hrm_ant_id', type=BASE_TYPES[0x8B], def_num=1),
        2: Field(name='log_hrv', type=FIELD_TYPES['bool'], def_num=2),
        3: Field(name='hrm_ant_id_trans_type', type=BASE_TYPES[0x0A], def_num=3),
        254: Field(name='message_index', type=FIELD_TYPES['message_index'], def_num=254),
    }),

    # ################################ zones_target (7) ################################
    7: MessageType(name='zones_target', mesg_num=7, fields={
        1: Field(name='max_heart_rate', type=BASE_TYPES[0x02], def_num=1),
        2: Field(name='threshold_heart_rate', type=BASE_TYPES[0x02], def_num=2),
        3: Field(name='functional_threshold_power', type=BASE_TYPES[0x84], def_num=3),
        5: Field(name='hr_calc_type', type=FIELD_TYPES['hr_zone_calc'], def_num=5),
        7: Field(name='pwr_calc_type', type=FIELD_TYPES['pwr_zone_calc'], def_num=7),
    }),

    # ################################ hr_zone (8) ################################
    8: MessageType(name='hr_zone', mesg_num=8, fields={
        1: Field(name='high_bpm', type=BASE_TYPES[0x02], def_num=1, units='bpm'),
        2: Field(name='name', type=BASE_TYPES[0x07], def_num=2),
        254: Field(name='message_index', type=FIELD_TYPES['message_index'], def_num=254),
    }),

    # ################################ power_zone (9) ################################
    9: MessageType(name='power_zone', mesg_num=9, fields={
        1: Field(name='high_value', type=BASE_TYPES[0x84], def_num=1, units='watts'),
        2: Field(name='name', type=BASE_TYPES[0x07], def_num=2),
        254: Field(name='message_index', type=FIELD_TYPES['message_index'], def_num=254),
    }),

    # ################################ met_zone (10) ################################
    10: MessageType(name='met_zone', mesg_num=10, fields={
        1: Field(name='high_bpm', type=BASE_TYPES[0x02], def_num=1),
        2: Field(name='calories', type=BASE_TYPES[0x84], def_num=2, scale=10, units='kcal / min'),
        3: Field(name='fat_calories', type=BASE_TYPES[0x02], def_num=3, scale=10, units='kcal / min'),
        254: Field(name='message_index', type=FIELD_TYPES['message_index'], def_num=254),
    }),

    # ################################ sport (12) ################################
    12: MessageType(name='sport', mesg_num=12, fields={
        0: Field(name='sport', type=FIELD_TYPES['sport'], def_num=0),
        1: Field(name='sub_sport', type=FIELD_TYPES['sub_sport'], def_num=1),
        3: Field(name='name', type=BASE_TYPES[0x07], def_num=3),
    }),

    # ################################ session (18) ################################
    18: MessageType(name='session', mesg_num=18, fields={
        0: Field(name='event', type=FIELD_TYPES['event'], def_num=0),
        1: Field(name='event_type', type=FIELD_TYPES['event_type'], def_num=1),
        2: Field(name='start_time', type=FIELD_TYPES['date_time'], def_num=2),
        3: Field(name='start_position_lat', type=BASE_TYPES[0x85], def_num=3, units='semicircles'),
        4: Field(name='start_position_long', type=BASE_TYPES[0x85], def_num=4, units='semicircles'),
        5: Field(name='sport', type=FIELD_TYPES['sport'], def_num=5),
        6: Field(name='sub_sport', type=FIELD_TYPES['sub_sport'], def_num=6),
        7: Field(name='total_elapsed_time', type=BASE_TYPES[0x86], def_num=7, scale=1000, units='s'),
        8: Field(name='total_timer_time', type=BASE_TYPES[0x86], def_num=8, scale=1000, units='s'),
        9: Field(name='total_distance', type=BASE_TYPES[0x86], def_num=9, scale=100, units='m'),
        10: Field(name='total_cycles', type=BASE_TYPES[0x86], def_num=10, units='cycles', subfields=(
            SubField(name='total_strides', def_num=10, type=BASE_TYPES[0x86], units='strides', ref_fields=(
                ReferenceField(name='sport', def_num=5, value='running', raw_value=1),
                ReferenceField(name='sport', def_num=5, value='walking', raw_value=11),
            )),
        )),
        11: Field(name='total_calories', type=BASE_TYPES[0x84], def_num=11, units='kcal'),
        13: Field(name='total_fat_calories', type=BASE_TYPES[0x84], def_num=13, units='kcal'),
        14: Field(name='avg_speed', type=BASE_TYPES[0x84], def_num=14, scale=1000, units='m/s', components=(
            ComponentField(name='enhanced_avg_speed', def_num=124, scale=1000, units='m/s', accumulate=False, bits=16, bit_offset=0),
        )),
        15: Field(name='max_speed', type=BASE_TYPES[0x84], def_num=15, scale=1000, units='m/s', components=(
            ComponentField(name='enhanced_max_speed', def_num=125, scale=1000, units='m/s', accumulate=False, bits=16, bit_offset=0),
        )),
        16: Field(name='avg_heart_rate', type=BASE_TYPES[0x02], def_num=16, units='bpm'),
        17: Field(name='max_heart_rate', type=BASE_TYPES[0x02], def_num=17, units='bpm'),
        18: Field(name='avg_cadence', type=BASE_TYPES[0x02], def_num=18, units='rpm', subfields=(
            SubField(name='avg_running_cadence', def_num=18, type=BASE_TYPES[0x02], units='strides/min', ref_fields=(
                ReferenceField(name='sport', def_num=5, value='running', raw_value=1),
            )),
        )),
        19: Field(name='max_cadence', type=BASE_TYPES[0x02], def_num=19, units='rpm', subfields=(
            SubField(name='max_running_cadence', def_num=19, type=BASE_TYPES[0x02], units='strides/min', ref_fields=(
                ReferenceField(name='sport', def_num=5, value='running', raw_value=1),
            )),
        )),
        20: Field(name='avg_power', type=BASE_TYPES[0x84], def_num=20, units='watts'),
        21: Field(name='max_power', type=BASE_TYPES[0x84], def_num=21, units='watts'),
        22: Field(name='total_ascent', type=BASE_TYPES[0x84], def_num=22, units='m'),
        23: Field(name='total_descent', type=BASE_TYPES[0x84], def_num=23, units='m'),
        24: Field(name='total_training_effect', type=BASE_TYPES[0x02], def_num=24, scale=10),
        25: Field(name='first_lap_index', type=BASE_TYPES[0x84], def_num=25),
        26: Field(name='num_laps', type=BASE_TYPES[0x84], def_num=26),
        27: Field(name='event_group', type=BASE_TYPES[0x02], def_num=27),
        28: Field(name='trigger', type=FIELD_TYPES['session_trigger'], def_num=28),
        124: Field(name='enhanced_avg_speed', type=BASE_TYPES[0x86], def_num=124, scale=1000, units='m/s'),
        125: Field(name='enhanced_max_speed', type=BASE_TYPES[0x86], def_num=125, scale=1000, units='m/s'),
        253: Field(name='timestamp', type=FIELD_TYPES['date_time'], def_num=253, units='s'),
        254: Field(name='message_index', type=FIELD_TYPES['message_index'], def_num=254),
    }),

    # ################################ lap (19) ################################
    19: MessageType(name='lap', mesg_num=19, fields={
        0: Field(name='event', type=FIELD_TYPES['event'], def_num=0),
        1: Field(name='event_type', type=FIELD_TYPES['event_type'], def_num=1),
        2: Field(name='start_time', type=FIELD_TYPES['date_time'], def_num=2),
        3: Field(name='start_position_lat', type=BASE_TYPES[0x85], def_num=3, units='semicircles'),
        4: Field(name='start_position_long', type=BASE_TYPES[0x85], def_num=4, units='semicircles'),
        5: Field(name='end_position_lat', type=BASE_TYPES[0x85], def_num=5, units='semicircles'),
        6: Field(name='end_position_long', type=BASE_TYPES[0x85], def_num=6, units='semicircles'),
        7: Field(name='total_elapsed_time', type=BASE_TYPES[0x86], def_num=7, scale=1000, units='s'),
        8: Field(name='total_timer_time', type=BASE_TYPES[0x86], def_num=8, scale=1000, units='s'),
        9: Field(name='total_distance', type=BASE_TYPES[0x86], def_num=9, scale=100, units='m'),
        10: Field(name='total_cycles', type=BASE_TYPES[0x86], def_num=10, units='cycles', subfields=(
            SubField(name='total_strides', def_num=10, type=BASE_TYPES[0x86], units='strides', ref_fields=(
                ReferenceField(name='sport', def_num=25, value='running', raw_value=1),
                ReferenceField(name='sport', def_num=25, value='walking', raw_value=11),
            )),
        )),
        11: Field(name='total_calories', type=BASE_TYPES[0x84], def_num=11, units='kcal'),
        12: Field(name='total_fat_calories', type=BASE_TYPES[0x84], def_num=12, units='kcal'),
        13: Field(name='avg_speed', type=BASE_TYPES[0x84], def_num=13, scale=1000, units='m/s', components=(
            ComponentField(name='enhanced_avg_speed', def_num=110, scale=1000, units='m/s', accumulate=False, bits=16, bit_offset=0),
        )),
        14: Field(name='max_speed', type=BASE_TYPES[0x84], def_num=14, scale=1000, units='m/s', components=(
            ComponentField(name='enhanced_max_speed', def_num=111, scale=1000, units='m/s', accumulate=False, bits=16, bit_offset=0),
        )),
        15: Field(name='avg_heart_rate', type=BASE_TYPES[0x02], def_num=15, units='bpm'),
        16: Field(name='max_heart_rate', type=BASE_TYPES[0x02], def_num=16, units='bpm'),
        17: Field(name='avg_cadence', type=BASE_TYPES[0x02], def_num=17, units='rpm', subfields=(
            SubField(name='avg_running_cadence', def_num=17, type=BASE_TYPES[0x02], units='strides/min', ref_fields=(
                ReferenceField(name='sport', def_num=25, value='running', raw_value=1),
            )),
        )),
        18: Field(name='max_cadence', type=BASE_TYPES[0x02], def_num=18, units='rpm', subfields=(
            SubField(name='max_running_cadence', def_num=18, type=BASE_TYPES[0x02], units='strides/min', ref_fields=(
                ReferenceField(name='sport', def_num=25, value='running', raw_value=1),
            )),
        )),
        19: Field(name='avg_power', type=BASE_TYPES[0x84], def_num=19, units='watts'),
        20: Field(name='max_power', type=BASE_TYPES[0x84], def_num=20, units='watts'),
        21: Field(name='total_ascent', type=BASE_TYPES[0x84], def_num=21, units='m'),
        22: Field(name='total_descent', type=BASE_TYPES[0x84], def_num=22, units='m'),
        23: Field(name='intensity', type=FIELD_TYPES['intensity'], def_num=23),
        24: Field(name='lap_trigger', type=FIELD_TYPES['lap_trigger'], def_num=24),
        25: Field(name='sport', type=FIELD_TYPES['sport'], def_num=25),
        26: Field(name='event_group', type=BASE_TYPES[0x02], def_num=26),
        110: Field(name='enhanced_avg_speed', type=BASE_TYPES[0x86], def_num=110, scale=1000, units='m/s'),
        111: Field(name='enhanced_max_speed', type=BASE_TYPES[0x86], def_num=111, scale=1000, units='m/s'),
        253: Field(name='timestamp', type=FIELD_TYPES['date_time'], def_num=253, units='s'),
        254: Field(name='message_index', type=FIELD_TYPES['message_index'], def_num=254),
    }),

    # ################################ record (20) ################################
    20: MessageType(name='record', mesg_num=20, fields={
        0: Field(name='position_lat', type=BASE_TYPES[0x85], def_num=0, units='semicircles'),
        1: Field(name='position_long', type=BASE_TYPES[0x85], def_num=1, units='semicircles'),
        2: Field(name='altitude', type=BASE_TYPES[0x84], def_num=2, scale=5, offset=500, units='m', components=(
            ComponentField(name='enhanced_altitude', def_num=78, scale=5, offset=500, units='m', accumulate=False, bits=16, bit_offset=0),
        )),
        3: Field(name='heart_rate', type=BASE_TYPES[0x02], def_num=3, units='bpm'),
        4: Field(name='cadence', type=BASE_TYPES[0x02], def_num=4, units='rpm'),
        5: Field(name='distance', type=BASE_TYPES[0x86], def_num=5, scale=100, units='m'),
        6: Field(name='speed', type=BASE_TYPES[0x84], def_num=6, scale=1000, units='m/s', components=(
            ComponentField(name='enhanced_speed', def_num=73, scale=1000, units='m/s', accumulate=False, bits=16, bit_offset=0),
        )),
        7: Field(name='power', type=BASE_TYPES[0x84], def_num=7, units='watts'),
        8: Field(name='compressed_speed_distance', type=BASE_TYPES[0x0D], def_num=8, components=(
            ComponentField(name='speed', def_num=6, scale=100, units='m/s', accumulate=False, bits=12, bit_offset=0),
            ComponentField(name='distance', def_num=5, scale=16, units='m', accumulate=True, bits=12, bit_offset=12),
        )),
        9: Field(name='grade', type=BASE_TYPES[0x83], def_num=9, scale=100, units='%'),
        10: Field(name='resistance', type=BASE_TYPES[0x02], def_num=10),
        11: Field(name='time_from_course', type=BASE_TYPES[0x85], def_num=11, scale=1000, units='s'),
        12: Field(name='cycle_length', type=BASE_TYPES[0x02], def_num=12, scale=100, units='m'),
        13: Field(name='temperature', type=BASE_TYPES[0x01], def_num=13, units='C'),
        17: Field(name='speed_1s', type=BASE_TYPES[0x02], def_num=17, scale=16, units='m/s'),
        18: Field(name='cycles', type=BASE_TYPES[0x02], def_num=18, units='cycles', components=(
            ComponentField(name='total_cycles', def_num=19, units='cycles', accumulate=True, bits=8, bit_offset=0),
        )),
        19: Field(name='total_cycles', type=BASE_TYPES[0x86], def_num=19, units='cycles'),
        28: Field(name='compressed_accumulated_power', type=BASE_TYPES[0x84], def_num=28, units='watts', components=(
            ComponentField(name='accumulated_power', def_num=29, units='watts', accumulate=True, bits=16, bit_offset=0),
        )),
        29: Field(name='accumulated_power', type=BASE_TYPES[0x86], def_num=29, units='watts'),
        30: Field(name='left_right_balance', type=FIELD_TYPES['left_right_balance'], def_num=30),
        31: Field(name='gps_accuracy', type=BASE_TYPES[0x02], def_num=31, units='m'),
        32: Field(name='vertical_speed', type=BASE_TYPES[0x83], def_num=32, scale=1000, units='m/s'),
        33: Field(name='calories', type=BASE_TYPES[0x84], def_num=33, units='kcal'),
        39: Field(name='vertical_oscillation', type=BASE_TYPES[0x84], def_num=39, scale=10, units='mm'),
        40: Field(name='stance_time_percent', type=BASE_TYPES[0x84], def_num=40, scale=100, units='percent'),
        41: Field(name='stance_time', type=BASE_TYPES[0x84], def_num=41, scale=10, units='ms'),
        42: Field(name='activity_type', type=FIELD_TYPES['activity_type'], def_num=42),
        53: Field(name='fractional_cadence', type=BASE_TYPES[0x02], def_num=53, scale=128, units='rpm'),
        73: Field(name='enhanced_speed', type=BASE_TYPES[0x86], def_num=73, scale=1000, units='m/s'),
        78: Field(name='enhanced_altitude', type=BASE_TYPES[0x86], def_num=78, scale=5, offset=500, units='m'),
        91: Field(name='absolute_pressure', type=BASE_TYPES[0x86], def_num=91, units='Pa'),
        92: Field(name='depth', type=BASE_TYPES[0x86], def_num=92, scale=1000, units='m'),
        93: Field(name='next_stop_depth', type=BASE_TYPES[0x86], def_num=93, scale=1000, units='m'),
        94: Field(name='next_stop_time', type=BASE_TYPES[0x86], def_num=94, units='s'),
        95: Field(name='time_to_surface', type=BASE_TYPES[0x86], def_num=95, units='s'),
        96: Field(name='ndl_time', type=BASE_TYPES[0x86], def_num=96, units='s'),
        97: Field(name='cns_load', type=BASE_TYPES[0x02], def_num=97, units='percent'),
        98: Field(name='n2_load', type=BASE_TYPES[0x84], def_num=98, units='percent'),
        253: Field(name='timestamp', type=FIELD_TYPES['date_time'], def_num=253, units='s'),
    }),

    # ################################ event (21) ################################
    21: MessageType(name='event', mesg_num=21, fields={
        0: Field(name='event', type=FIELD_TYPES['event'], def_num=0),
        1: Field(name='event_type', type=FIELD_TYPES['event_type'], def_num=1),
        2: Field(name='data16', type=BASE_TYPES[0x84], def_num=2, components=(
            ComponentField(name='data', def_num=3, accumulate=False, bits=16, bit_offset=0),
        )),
        3: Field(name='data', type=BASE_TYPES[0x86], def_num=3, subfields=(
            SubField(name='timer_trigger', def_num=3, type=FIELD_TYPES['timer_trigger'], ref_fields=(
                ReferenceField(name='event', def_num=0, value='timer', raw_value=0),
            )),
            SubField(name='course_point_index', def_num=3, type=FIELD_TYPES['message_index'], ref_fields=(
                ReferenceField(name='event', def_num=0, value='course_point', raw_value=10),
            )),
            SubField(name='battery_level', def_num=3, type=BASE_TYPES[0x84], scale=1000, units='V', ref_fields=(
                ReferenceField(name='event', def_num=0, value='battery', raw_value=11),
            )),
            SubField(name='virtual_partner_speed', def_num=3, type=BASE_TYPES[0x84], scale=1000, units='m/s', ref_fields=(
                ReferenceField(name='event', def_num=0, value='virtual_partner_pace', raw_value=12),
            )),
            SubField(name='hr_high_alert', def_num=3, type=BASE_TYPES[0x02], units='bpm', ref_fields=(
                ReferenceField(name='event', def_num=0, value='hr_high_alert', raw_value=13),
            )),
            SubField(name='hr_low_alert', def_num=3, type=BASE_TYPES[0x02], units='bpm', ref_fields=(
                ReferenceField(name='event', def_num=0, value='hr_low_alert', raw_value=14),
            )),
            SubField(name='speed_high_alert', def_num=3, type=BASE_TYPES[0x86], scale=1000, units='m/s', ref_fields=(
                ReferenceField(name='event', def_num=0, value='speed_high_alert', raw_value=15),
            )),
            SubField(name='speed_low_alert', def_num=3, type=BASE_TYPES[0x86], scale=1000, units='m/s', ref_fields=(
                ReferenceField(name='event', def_num=0, value='speed_low_alert', raw_value=16),
            )),
            SubField(name='cad_high_alert', def_num=3, type=BASE_TYPES[0x84], units='rpm', ref_fields=(
                ReferenceField(name='event', def_num=0, value='cad_high_alert', raw_value=17),
            )),
            SubField(name='cad_low_alert', def_num=3, type=BASE_TYPES[0x84], units='rpm', ref_fields=(
                ReferenceField(name='event', def_num=0, value='cad_low_alert', raw_value=18),
            )),
            SubField(name='power_high_alert', def_num=3, type=BASE_TYPES[0x84], units='watts', ref_fields=(
                ReferenceField(name='event', def_num=0, value='power_high_alert', raw_value=19),
            )),
            SubField(name='power_low_alert', def_num=3, type=BASE_TYPES[0x84], units='watts', ref_fields=(
                ReferenceField(name='event', def_num=0, value='power_low_alert', raw_value=20),
            )),
            SubField(name='time_duration_alert', def_num=3, type=BASE_TYPES[0x86], scale=1000, units='s', ref_fields=(
                ReferenceField(name='event', def_num=0, value='time_duration_alert', raw_value=23),
            )),
            SubField(name='distance_duration_alert', def_num=3, type=BASE_TYPES[0x86], scale=100, units='m', ref_fields=(
                ReferenceField(name='event', def_num=0, value='distance_duration_alert', raw_value=24),
            )),
            SubField(name='calorie_duration_alert', def_num=3, type=BASE_TYPES[0x86], units='calories', ref_fields=(
                ReferenceField(name='event', def_num=0, value='calorie_duration_alert', raw_value=25),
            )),
            SubField(name='fitness_equipment_state', def_num=3, type=FIELD_TYPES['fitness_equipment_state'], ref_fields=(
                ReferenceField(name='event', def_num=0, value='fitness_equipment', raw_value=27),
            )),
            SubField(name='sport_point', def_num=3, type=BASE_TYPES[0x86], ref_fields=(
                ReferenceField(name='event', def_num=0, value='sport_point', raw_value=33),
            ), components=(
                ComponentField(name='score', def_num=7, accumulate=False, bits=16, bit_offset=0),
                ComponentField(name='opponent_score', def_num=8, accumulate=False, bits=16, bit_offset=16),
            )),
            SubField(name='gear_change_data', def_num=3, type=BASE_TYPES[0x86], ref_fields=(
                ReferenceField(name='event', def_num=0, value='front_gear_change', raw_value=42),
                ReferenceField(name='event', def_num=0, value='rear_gear_change', raw_value=43),
            ), components=(
                ComponentField(name='rear_gear_num', def_num=11, accumulate=False, bits=8, bit_offset=0),
                ComponentField(name='rear_gear', def_num=12, accumulate=False, bits=8, bit_offset=8),
                ComponentField(name='front_gear_num', def_num=9, accumulate=False, bits=8, bit_offset=16),
                ComponentField(name='front_gear', def_num=10, accumulate=False, bits=8, bit_offset=24),
            )),
        )),
        4: Field(name='event_group', type=BASE_TYPES[0x02], def_num=4),
        7: Field(name='score', type=BASE_TYPES[0x84], def_num=7),
        8: Field(name='opponent_score', type=BASE_TYPES[0x84], def_num=8),
        9: Field(name='front_gear_num', type=BASE_TYPES[0x0A], def_num=9),
        10: Field(name='front_gear', type=BASE_TYPES[0x0A], def_num=10),
        11: Field(name='rear_gear_num', type=BASE_TYPES[0x0A], def_num=11),
        12: Field(name='rear_gear', type=BASE_TYPES[0x0A], def_num=12),
        13: Field(name='device_index', type=FIELD_TYPES['device_index'], def_num=13),
        253: Field(name='timestamp', type=FIELD_TYPES['date_time'], def_num=253, units='s'),
    }),

    # ################################ device_info (23) ################################
    23: MessageType(name='device_info', mesg_num=23, fields={
        0: Field(name='device_index', type=FIELD_TYPES['device_index'], def_num=0),
        1: Field(name='device_type', type=BASE_TYPES[0x02], def_num=1, subfields=(
            SubField(name='antplus_device_type', def_num=1, type=FIELD_TYPES['antplus_device_type'], ref_fields=(
                ReferenceField(name='source_type', def_num=25, value='antplus', raw_value=1),
            )),
        )),
        2: Field(name='manufacturer', type=FIELD_TYPES['manufacturer'], def_num=2),
        3: Field(name='serial_number', type=BASE_TYPES[0x8C], def_num=3),
        4: Field(name='product', type=BASE_TYPES[0x84], def_num=4, subfields=(
            SubField(name='garmin_product', def_num=4, type=FIELD_TYPES['garmin_product'], ref_fields=(
                ReferenceField(name='manufacturer', def_num=2, value='garmin', raw_value=1),
                ReferenceField(name='manufacturer', def_num=2, value='dynastream', raw_value=15),
                ReferenceField(name='manufacturer', def_num=2, value='dynastream_oem', raw_value=13),
                ReferenceField(name='manufacturer', def_num=2, value='tacx', raw_value=89),
            )),
        )),
        5: Field(name='software_version', type=BASE_TYPES[0x84], def_num=5, scale=100),
        6: Field(name='hardware_version', type=BASE_TYPES[0x02], def_num=6),
        7: Field(name='cum_operating_time', type=BASE_TYPES[0x86], def_num=7, units='s'),
        10: Field(name='battery_voltage', type=BASE_TYPES[0x84], def_num=10, scale=256, units='V'),
        11: Field(name='battery_status', type=FIELD_TYPES['battery_status'], def_num=11),
        25: Field(name='source_type', type=FIELD_TYPES['source_type'], def_num=25),
        27: Field(name='product_name', type=BASE_TYPES[0x07], def_num=27),
        253: Field(name='timestamp', type=FIELD_TYPES['date_time'], def_num=253, units='s'),
    }),

    # ################################ activity (34) ################################
    34: MessageType(name='activity', mesg_num=34, fields={
        0: Field(name='total_timer_time', type=BASE_TYPES[0x86], def_num=0, scale=1000, units='s'),
        1: Field(name='num_sessions', type=BASE_TYPES[0x84], def_num=1),
        2: Field(name='type', type=FIELD_TYPES['activity'], def_num=2),
        3: Field(name='event', type=FIELD_TYPES['event'], def_num=3),
        4: Field(name='event_type', type=FIELD_TYPES['event_type'], def_num=4),
        5: Field(name='local_timestamp', type=FIELD_TYPES['local_date_time'], def_num=5),
        6: Field(name='event_group', type=BASE_TYPES[0x02], def_num=6),
        253: Field(name='timestamp', type=FIELD_TYPES['date_time'], def_num=253, units='s'),
    }),

    # ################################ file_creator (49) ################################
    49: MessageType(name='file_creator', mesg_num=49, fields={
        0: Field(name='software_version', type=BASE_TYPES[0x84], def_num=0),
        1: Field(name='hardware_version', type=BASE_TYPES[0x02], def_num=1),
    }),

    # ################################ hrv (78) ################################
    78: MessageType(name='hrv', mesg_num=78, fields={
        0: Field(name='time', type=BASE_TYPES[0x84], def_num=0, scale=1000, units='s'),
    }),

    # ################################ field_description (206) ################################
    206: MessageType(name='field_description', mesg_num=206, fields={
        0: Field(name='developer_data_index', type=BASE_TYPES[0x02], def_num=0),
        1: Field(name='field_definition_number', type=BASE_TYPES[0x02], def_num=1),
        2: Field(name='fit_base_type_id', type=FIELD_TYPES['fit_base_type'], def_num=2),
        3: Field(name='field_name', type=BASE_TYPES[0x07], def_num=3),
        4: Field(name='array', type=BASE_TYPES[0x02], def_num=4),
        5: Field(name='components', type=BASE_TYPES[0x07], def_num=5),
        6: Field(name='scale', type=BASE_TYPES[0x02], def_num=6),
        7: Field(name='offset', type=BASE_TYPES[0x01], def_num=7),
        8: Field(name='units', type=BASE_TYPES[0x07], def_num=8),
        9: Field(name='bits', type=BASE_TYPES[0x07], def_num=9),
        10: Field(name='accumulate', type=BASE_TYPES[0x07], def_num=10),
        13: Field(name='fit_base_unit_id', type=BASE_TYPES[0x84], def_num=13),
        14: Field(name='native_mesg_num', type=FIELD_TYPES['mesg_num'], def_num=14),
        15: Field(name='native_field_num', type=BASE_TYPES[0x02], def_num=15),
    }),

    # ################################ developer_data_id (207) ################################
    207: MessageType(name='developer_data_id', mesg_num=207, fields={
        0: Field(name='developer_id', type=BASE_TYPES[0x0D], def_num=0),
        1: Field(name='application_id', type=BASE_TYPES[0x0D], def_num=1),
        2: Field(name='manufacturer_id', type=FIELD_TYPES['manufacturer'], def_num=2),
        3: Field(name='developer_data_index', type=BASE_TYPES[0x02], def_num=3),
        4: Field(name='application_version', type=BASE_TYPES[0x86], def_num=4),
    }),

    # ################################ dive_settings (258) ################################
    258: MessageType(name='dive_settings', mesg_num=258, fields={
        0: Field(name='name', type=BASE_TYPES[0x07], def_num=0),
        1: Field(name='model', type=FIELD_TYPES['tissue_model_type'], def_num=1),
        2: Field(name='gf_low', type=BASE_TYPES[0x02], def_num=2, units='percent'),
        3: Field(name='gf_high', type=BASE_TYPES[0x02], def_num=3, units='percent'),
        4: Field(name='water_type', type=FIELD_TYPES['water_type'], def_num=4),
        5: Field(name='water_density', type=BASE_TYPES[0x88], def_num=5, units='kg/m^3'),
        6: Field(name='po2_warn', type=BASE_TYPES[0x02], def_num=6, scale=100, units='percent'),
        7: Field(name='po2_critical', type=BASE_TYPES[0x02], def_num=7, scale=100, units='percent'),
        8: Field(name='po2_deco', type=BASE_TYPES[0x02], def_num=8, scale=100, units='percent'),
        9: Field(name='safety_stop_enabled', type=FIELD_TYPES['bool'], def_num=9),
        10: Field(name='bottom_depth', type=BASE_TYPES[0x88], def_num=10),
        11: Field(name='bottom_time', type=BASE_TYPES[0x86], def_num=11),
        254: Field(name='message_index', type=FIELD_TYPES['message_index'], def_num=254),
    }),

    # ################################ dive_gas (259) ################################
    259: MessageType(name='dive_gas', mesg_num=259, fields={
        0: Field(name='helium_content', type=BASE_TYPES[0x02], def_num=0, units='percent'),
        1: Field(name='oxygen_content', type=BASE_TYPES[0x02], def_num=1, units='percent'),
        2: Field(name='status', type=FIELD_TYPES['dive_gas_status'], def_num=2),
        254: Field(name='message_index', type=FIELD_TYPES['message_index'], def_num=254),
    }),

    # ################################ dive_alarm (262) ################################
    262: MessageType(name='dive_alarm', mesg_num=262, fields={
        0: Field(name='depth', type=BASE_TYPES[0x86], def_num=0, scale=1000, units='m'),
        1: Field(name='time', type=BASE_TYPES[0x85], def_num=1, units='s'),
        2: Field(name='enabled', type=FIELD_TYPES['bool'], def_num=2),
        3: Field(name='alarm_type', type=FIELD_TYPES['dive_alarm_type'], def_num=3),
        4: Field(name='sound', type=FIELD_TYPES['tone'], def_num=4),
        5: Field(name='dive_types', type=FIELD_TYPES['sub_sport'], def_num=5),
        6: Field(name='id', type=BASE_TYPES[0x86], def_num=6),
        7: Field(name='popup_enabled', type=FIELD_TYPES['bool'], def_num=7),
        8: Field(name='trigger_on_descent', type=FIELD_TYPES['bool'], def_num=8),
        9: Field(name='trigger_on_ascent', type=FIELD_TYPES['bool'], def_num=9),
        10: Field(name='repeating', type=FIELD_TYPES['bool'], def_num=10),
        11: Field(name='speed', type=BASE_TYPES[0x85], def_num=11, scale=1000, units='mps'),
        254: Field(name='message_index', type=FIELD_TYPES['message_index'], def_num=254),
    }),

    # ################################ dive_summary (268) ################################
    268: MessageType(name='dive_summary', mesg_num=268, fields={
        0: Field(name='reference_mesg', type=FIELD_TYPES['mesg_num'], def_num=0),
        1: Field(name='reference_index', type=FIELD_TYPES['message_index'], def_num=1),
        2: Field(name='avg_depth', type=BASE_TYPES[0x86], def_num=2, scale=1000, units='m'),
        3: Field(name='max_depth', type=BASE_TYPES[0x86], def_num=3, scale=1000, units='m'),
        4: Field(name='surface_interval', type=BASE_TYPES[0x86], def_num=4, units='s'),
        5: Field(name='start_cns', type=BASE_TYPES[0x02], def_num=5, units='percent'),
        6: Field(name='end_cns', type=BASE_TYPES[0x02], def_num=6, units='percent'),
        7: Field(name='start_n2', type=BASE_TYPES[0x84], def_num=7, units='percent'),
        8: Field(name='end_n2', type=BASE_TYPES[0x84], def_num=8, units='percent'),
        9: Field(name='o2_toxicity', type=BASE_TYPES[0x84], def_num=9, units='OTUs'),
        10: Field(name='dive_number', type=BASE_TYPES[0x86], def_num=10),
        11: Field(name='bottom_time', type=BASE_TYPES[0x86], def_num=11, scale=1000, units='s'),
        253: Field(name='timestamp', type=FIELD_TYPES['date_time'], def_num=253, units='s'),
    }),
}

MESG_NUM_FILE_ID = 0
MESG_NUM_USER_PROFILE = 3
MESG_NUM_HRM_PROFILE = 4
MESG_NUM_ZONES_TARGET = 7
MESG_NUM_HR_ZONE = 8
MESG_NUM_POWER_ZONE = 9
MESG_NUM_MET_ZONE = 10
MESG_NUM_SPORT = 12
MESG_NUM_SESSION = 18
MESG_NUM_LAP = 19
MESG_NUM_RECORD = 20
MESG_NUM_EVENT = 21
MESG_NUM_DEVICE_INFO = 23
MESG_NUM_ACTIVITY = 34
MESG_NUM_FILE_CREATOR = 49
MESG_NUM_HRV = 78
MESG_NUM_FIELD_DESCRIPTION = 206
MESG_NUM_DEVELOPER_DATA_ID = 207
MESG_NUM_DIVE_SETTINGS = 258
MESG_NUM_DIVE_GAS = 259
MESG_NUM_DIVE_ALARM = 262
MESG_NUM_DIVE_SUMMARY = 268

FIELD_NUM_TIMESTAMP = 253
FIELD_NUM_MESSAGE_INDEX = 254

FIELD_TYPE_TIMESTAMP = Field(name='timestamp', type=FIELD_TYPES['date_time'], def_num=253, units='s')
