"""
Field constants and source mappings for county ACS statistics.
Source tables come from the ACS 5-year detailed and subject tables: https://api.census.gov/data
"""

from __future__ import annotations

### Record fields: ###

# Core counts
POPULATION = "population"  # Total population
HOUSEHOLDS = "households"  # Households (computer and internet universe)
POPULATION_25_PLUS = "population_25_plus"  # Educational attainment universe

# Race (alone) and Hispanic origin
RACE_TOTAL = "race_total"
RACE_WHITE = "race_white"
RACE_BLACK = "race_black"
RACE_NATIVE = "race_native"  # American Indian and Alaska Native
RACE_ASIAN = "race_asian"
RACE_PACIFIC = "race_pacific"  # Native Hawaiian and Other Pacific Islander
RACE_OTHER = "race_other"  # Some other race
RACE_TWO_OR_MORE = "race_two_or_more"
HISPANIC = "hispanic"  # Hispanic or Latino, any race
HISPANIC_BASE = "hispanic_base"

# Employment status, population 16+
LABOR_UNIVERSE = "labor_universe_16_plus"
IN_LABOR_FORCE = "in_labor_force"
CIVILIAN_LABOR_FORCE = "civilian_labor_force"
EMPLOYED = "employed"
UNEMPLOYED = "unemployed"
ARMED_FORCES = "armed_forces"
NOT_IN_LABOR_FORCE = "not_in_labor_force"

# Poverty status universe
POVERTY_BASE = "poverty_base"

# Tenure
OCCUPIED_UNITS = "occupied_units"
OWNER_OCCUPIED = "owner_occupied"
RENTER_OCCUPIED = "renter_occupied"

# Year structure built, grouped into vintages
YEAR_BUILT_TOTAL = "year_built_total"
YEAR_BUILT_PRE_1980 = "year_built_pre_1980"
YEAR_BUILT_1980_1999 = "year_built_1980_1999"
YEAR_BUILT_2000_2009 = "year_built_2000_2009"
YEAR_BUILT_2010_PLUS = "year_built_2010_plus"

# Nativity and language spoken at home (population 5+)
FOREIGN_BORN = "foreign_born"
FOREIGN_BORN_BASE = "foreign_born_base"
LANGUAGE_BASE = "language_base_5_plus"
ENGLISH_ONLY = "english_only"
SPANISH_AT_HOME = "spanish_at_home"

# Land area in square metres, supplied with the county geometry
LAND_AREA_M2 = "land_area_m2"

COUNT_FIELDS = (
    POPULATION,
    HOUSEHOLDS,
    POPULATION_25_PLUS,
    RACE_TOTAL,
    RACE_WHITE,
    RACE_BLACK,
    RACE_NATIVE,
    RACE_ASIAN,
    RACE_PACIFIC,
    RACE_OTHER,
    RACE_TWO_OR_MORE,
    HISPANIC,
    HISPANIC_BASE,
    LABOR_UNIVERSE,
    IN_LABOR_FORCE,
    CIVILIAN_LABOR_FORCE,
    EMPLOYED,
    UNEMPLOYED,
    ARMED_FORCES,
    NOT_IN_LABOR_FORCE,
    POVERTY_BASE,
    OCCUPIED_UNITS,
    OWNER_OCCUPIED,
    RENTER_OCCUPIED,
    YEAR_BUILT_TOTAL,
    YEAR_BUILT_PRE_1980,
    YEAR_BUILT_1980_1999,
    YEAR_BUILT_2000_2009,
    YEAR_BUILT_2010_PLUS,
    FOREIGN_BORN,
    FOREIGN_BORN_BASE,
    LANGUAGE_BASE,
    ENGLISH_ONLY,
    SPANISH_AT_HOME,
    LAND_AREA_M2,
)

RACE_GROUPS = (
    RACE_WHITE,
    RACE_BLACK,
    RACE_NATIVE,
    RACE_ASIAN,
    RACE_PACIFIC,
    RACE_OTHER,
    RACE_TWO_OR_MORE,
)

YEAR_BUILT_GROUPS = (
    YEAR_BUILT_PRE_1980,
    YEAR_BUILT_1980_1999,
    YEAR_BUILT_2000_2009,
    YEAR_BUILT_2010_PLUS,
)

# Percentages and the count each one is a share of
EDU_HS_OR_HIGHER_PCT = "edu_hs_or_higher_pct"
EDU_BA_OR_HIGHER_PCT = "edu_ba_or_higher_pct"
BROADBAND_PCT = "broadband_pct"
POVERTY_PCT = "poverty_pct"

PERCENT_DENOMINATORS = {
    EDU_HS_OR_HIGHER_PCT: POPULATION_25_PLUS,
    EDU_BA_OR_HIGHER_PCT: POPULATION_25_PLUS,
    BROADBAND_PCT: HOUSEHOLDS,
    POVERTY_PCT: POVERTY_BASE,
}

# Published point statistics and the count each one is weighted by when combined
MEDIAN_HOUSEHOLD_INCOME = "median_household_income"
MEDIAN_GROSS_RENT = "median_gross_rent"

COMPANION_WEIGHTS = {
    MEDIAN_HOUSEHOLD_INCOME: HOUSEHOLDS,
    MEDIAN_GROSS_RENT: RENTER_OCCUPIED,
}

# Household income distribution
INCOME_HOUSEHOLDS = "income_households"  # Distribution total (B19001 universe)
INCOME_BIN_COUNT = 16

# Lower edges of the household income brackets; each bracket runs to the next
# edge (exclusive) and the last one ($200k+) is open-ended.
INCOME_BRACKET_EDGES = (
    0.0,
    10_000.0,
    15_000.0,
    20_000.0,
    25_000.0,
    30_000.0,
    35_000.0,
    40_000.0,
    45_000.0,
    50_000.0,
    60_000.0,
    75_000.0,
    100_000.0,
    125_000.0,
    150_000.0,
    200_000.0,
)

# Fine age cohorts as stored per county, youngest first
AGE_DETAIL_KEYS = (
    "a0_4",
    "a5_9",
    "a10_14",
    "a15_19",
    "a20_24",
    "a25_29",
    "a30_34",
    "a35_39",
    "a40_44",
    "a45_49",
    "a50_54",
    "a55_59",
    "a60_64",
    "a65_69",
    "a70_74",
    "a75_79",
    "a80p",
)

# Reported age cohorts composed from the fine cohorts
AGE_0_4 = "age_0_4"
AGE_5_19 = "age_5_19"
AGE_20_24 = "age_20_24"
AGE_25_44 = "age_25_44"
AGE_45_64 = "age_45_64"
AGE_65_74 = "age_65_74"
AGE_75_PLUS = "age_75_plus"

AGE_COHORTS = {
    AGE_0_4: ("a0_4",),
    AGE_5_19: ("a5_9", "a10_14", "a15_19"),
    AGE_20_24: ("a20_24",),
    AGE_25_44: ("a25_29", "a30_34", "a35_39", "a40_44"),
    AGE_45_64: ("a45_49", "a50_54", "a55_59", "a60_64"),
    AGE_65_74: ("a65_69", "a70_74"),
    AGE_75_PLUS: ("a75_79", "a80p"),
}

# Language base less English-only speakers
LANGUAGE_OTHER = "language_other"

### Summary keys: ###

AREA_MI2 = "area_mi2"
AREA_KM2 = "area_km2"
DENSITY_MI2 = "density_mi2"
DENSITY_KM2 = "density_km2"
INCOME_MEAN = "income_mean"

LABOR_FORCE_PARTICIPATION_PCT = "labor_force_participation_pct"
UNEMPLOYMENT_RATE_PCT = "unemployment_rate_pct"
OWNER_OCCUPIED_PCT = "owner_occupied_pct"
RENTER_OCCUPIED_PCT = "renter_occupied_pct"
FOREIGN_BORN_PCT = "foreign_born_pct"
LANGUAGE_OTHER_PCT = "language_other_pct"
SPANISH_AT_HOME_PCT = "spanish_at_home_pct"
HISPANIC_PCT = "hispanic_pct"

# Derived shares: summary key -> (numerator count, denominator count)
SHARE_DEFINITIONS = {
    LABOR_FORCE_PARTICIPATION_PCT: (IN_LABOR_FORCE, LABOR_UNIVERSE),
    UNEMPLOYMENT_RATE_PCT: (UNEMPLOYED, CIVILIAN_LABOR_FORCE),
    OWNER_OCCUPIED_PCT: (OWNER_OCCUPIED, OCCUPIED_UNITS),
    RENTER_OCCUPIED_PCT: (RENTER_OCCUPIED, OCCUPIED_UNITS),
    FOREIGN_BORN_PCT: (FOREIGN_BORN, FOREIGN_BORN_BASE),
    LANGUAGE_OTHER_PCT: (LANGUAGE_OTHER, LANGUAGE_BASE),
    SPANISH_AT_HOME_PCT: (SPANISH_AT_HOME, LANGUAGE_BASE),
    HISPANIC_PCT: (HISPANIC, HISPANIC_BASE),
    **{f"{group}_pct": (group, YEAR_BUILT_TOTAL) for group in YEAR_BUILT_GROUPS},
    **{f"{group}_pct": (group, RACE_TOTAL) for group in RACE_GROUPS},
    **{f"{cohort}_pct": (cohort, POPULATION) for cohort in AGE_COHORTS},
}

# Density is population over land area, paired per county like the shares
DENSITY_PAIR = (POPULATION, LAND_AREA_M2)

M2_PER_KM2 = 1_000_000.0
M2_PER_MI2 = 2_589_988.110336

### Source mappings: ###

# Map of record fields to keys in counties_stats.json.
STATS_FIELD_MAP = {
    POPULATION: "pop",
    HOUSEHOLDS: "households",
    POPULATION_25_PLUS: "pop25",
    RACE_TOTAL: "race_total",
    RACE_WHITE: "race_white",
    RACE_BLACK: "race_black",
    RACE_NATIVE: "race_native",
    RACE_ASIAN: "race_asian",
    RACE_PACIFIC: "race_pacific",
    RACE_OTHER: "race_other",
    RACE_TWO_OR_MORE: "race_two",
    HISPANIC: "hisp_total",
    HISPANIC_BASE: "hisp_base",
    LABOR_UNIVERSE: "emp_total16",
    IN_LABOR_FORCE: "emp_inLF",
    CIVILIAN_LABOR_FORCE: "emp_civLF",
    EMPLOYED: "emp_employed",
    UNEMPLOYED: "emp_unemployed",
    ARMED_FORCES: "emp_armed",
    NOT_IN_LABOR_FORCE: "emp_notLF",
    POVERTY_BASE: "pov_base",
    OCCUPIED_UNITS: "occ_units",
    OWNER_OCCUPIED: "owner_occ",
    RENTER_OCCUPIED: "renter_occ",
    YEAR_BUILT_TOTAL: "yb_total",
    YEAR_BUILT_PRE_1980: "yb_pre80",
    YEAR_BUILT_1980_1999: "yb_80_99",
    YEAR_BUILT_2000_2009: "yb_00_09",
    YEAR_BUILT_2010_PLUS: "yb_10p",
    FOREIGN_BORN: "foreign_total",
    FOREIGN_BORN_BASE: "foreign_base",
    LANGUAGE_BASE: "lang_base5",
    ENGLISH_ONLY: "eng_only",
    SPANISH_AT_HOME: "spanish",
    LAND_AREA_M2: "aland",
    EDU_HS_OR_HIGHER_PCT: "edu_hs_or_higher_pct",
    EDU_BA_OR_HIGHER_PCT: "edu_ba_or_higher_pct",
    BROADBAND_PCT: "broadband_any_pct",
    POVERTY_PCT: "pov_pct",
    MEDIAN_HOUSEHOLD_INCOME: "median_hh_income",
    MEDIAN_GROSS_RENT: "med_rent",
    INCOME_HOUSEHOLDS: "inc_total",
}

STATS_NAME_KEY = "name"
STATS_AGE_DETAIL_KEY = "age_detail"
STATS_INCOME_BINS_KEY = "inc_bins"
STATS_AREA_KM2_KEY = "area_km2"
STATS_YEAR_KEY = "year"

# Map of directly sourced record fields to ACS variable codes.
ACS_VARIABLE_MAP = {
    POPULATION: "B01003_001E",
    HOUSEHOLDS: "S2801_C01_001E",
    POPULATION_25_PLUS: "S1501_C01_006E",
    RACE_TOTAL: "B02001_001E",
    RACE_WHITE: "B02001_002E",
    RACE_BLACK: "B02001_003E",
    RACE_NATIVE: "B02001_004E",
    RACE_ASIAN: "B02001_005E",
    RACE_PACIFIC: "B02001_006E",
    RACE_OTHER: "B02001_007E",
    RACE_TWO_OR_MORE: "B02001_008E",
    HISPANIC: "B03003_003E",
    HISPANIC_BASE: "B03003_001E",
    LABOR_UNIVERSE: "B23025_001E",
    IN_LABOR_FORCE: "B23025_002E",
    CIVILIAN_LABOR_FORCE: "B23025_003E",
    EMPLOYED: "B23025_004E",
    UNEMPLOYED: "B23025_005E",
    ARMED_FORCES: "B23025_006E",
    NOT_IN_LABOR_FORCE: "B23025_007E",
    POVERTY_BASE: "S1701_C01_001E",
    OCCUPIED_UNITS: "B25003_001E",
    OWNER_OCCUPIED: "B25003_002E",
    RENTER_OCCUPIED: "B25003_003E",
    YEAR_BUILT_TOTAL: "B25034_001E",
    FOREIGN_BORN: "B05002_013E",
    FOREIGN_BORN_BASE: "B05002_001E",
    LANGUAGE_BASE: "C16001_001E",
    ENGLISH_ONLY: "C16001_002E",
    SPANISH_AT_HOME: "C16001_003E",
    EDU_HS_OR_HIGHER_PCT: "S1501_C02_014E",
    EDU_BA_OR_HIGHER_PCT: "S1501_C02_015E",
    BROADBAND_PCT: "S2801_C02_014E",
    POVERTY_PCT: "S1701_C02_001E",
    MEDIAN_HOUSEHOLD_INCOME: "B19013_001E",
    MEDIAN_GROSS_RENT: "B25064_001E",
    INCOME_HOUSEHOLDS: "B19001_001E",
}

# Vintage groups summed from B25034 (002 = built 2020 or later ... 011 = 1939 or earlier).
ACS_YEAR_BUILT_COMPONENTS = {
    YEAR_BUILT_2010_PLUS: ("B25034_002E", "B25034_003E"),
    YEAR_BUILT_2000_2009: ("B25034_004E",),
    YEAR_BUILT_1980_1999: ("B25034_005E", "B25034_006E"),
    YEAR_BUILT_PRE_1980: (
        "B25034_007E",
        "B25034_008E",
        "B25034_009E",
        "B25034_010E",
        "B25034_011E",
    ),
}

ACS_INCOME_BIN_CODES = tuple(f"B19001_{index:03d}E" for index in range(2, 18))
ACS_AGE_DETAIL_CODES = dict(
    zip(AGE_DETAIL_KEYS, (f"S0101_C01_{index:03d}E" for index in range(2, 19)))
)

# Saved API responses expected by the build script: table name -> (dataset, codes).
ACS_TABLES = {
    "pop_total": ("acs/acs5", (ACS_VARIABLE_MAP[POPULATION],)),
    "net": (
        "acs/acs5/subject",
        (ACS_VARIABLE_MAP[HOUSEHOLDS], ACS_VARIABLE_MAP[BROADBAND_PCT]),
    ),
    "edu": (
        "acs/acs5/subject",
        (
            ACS_VARIABLE_MAP[EDU_HS_OR_HIGHER_PCT],
            ACS_VARIABLE_MAP[EDU_BA_OR_HIGHER_PCT],
            ACS_VARIABLE_MAP[POPULATION_25_PLUS],
        ),
    ),
    "race": ("acs/acs5", tuple(f"B02001_{index:03d}E" for index in range(1, 9))),
    "hisp": ("acs/acs5", (ACS_VARIABLE_MAP[HISPANIC_BASE], ACS_VARIABLE_MAP[HISPANIC])),
    "age": ("acs/acs5/subject", tuple(ACS_AGE_DETAIL_CODES.values())),
    "income_dist": (
        "acs/acs5",
        (ACS_VARIABLE_MAP[INCOME_HOUSEHOLDS],) + ACS_INCOME_BIN_CODES,
    ),
    "income_median": ("acs/acs5", (ACS_VARIABLE_MAP[MEDIAN_HOUSEHOLD_INCOME],)),
    "employment": ("acs/acs5", tuple(f"B23025_{index:03d}E" for index in range(1, 8))),
    "poverty": (
        "acs/acs5/subject",
        (ACS_VARIABLE_MAP[POVERTY_PCT], ACS_VARIABLE_MAP[POVERTY_BASE]),
    ),
    "tenure": ("acs/acs5", ("B25003_001E", "B25003_002E", "B25003_003E")),
    "rent": ("acs/acs5", (ACS_VARIABLE_MAP[MEDIAN_GROSS_RENT],)),
    "yearbuilt": ("acs/acs5", tuple(f"B25034_{index:03d}E" for index in range(1, 12))),
    "foreign": ("acs/acs5", (ACS_VARIABLE_MAP[FOREIGN_BORN_BASE], ACS_VARIABLE_MAP[FOREIGN_BORN])),
    "lang": ("acs/acs5", ("C16001_001E", "C16001_002E", "C16001_003E")),
}

# State FIPS -> name, territories included.
STATE_NAMES = {
    "01": "Alabama", "02": "Alaska", "04": "Arizona", "05": "Arkansas",
    "06": "California", "08": "Colorado", "09": "Connecticut", "10": "Delaware",
    "11": "District of Columbia", "12": "Florida", "13": "Georgia", "15": "Hawaii",
    "16": "Idaho", "17": "Illinois", "18": "Indiana", "19": "Iowa",
    "20": "Kansas", "21": "Kentucky", "22": "Louisiana", "23": "Maine",
    "24": "Maryland", "25": "Massachusetts", "26": "Michigan", "27": "Minnesota",
    "28": "Mississippi", "29": "Missouri", "30": "Montana", "31": "Nebraska",
    "32": "Nevada", "33": "New Hampshire", "34": "New Jersey", "35": "New Mexico",
    "36": "New York", "37": "North Carolina", "38": "North Dakota", "39": "Ohio",
    "40": "Oklahoma", "41": "Oregon", "42": "Pennsylvania", "44": "Rhode Island",
    "45": "South Carolina", "46": "South Dakota", "47": "Tennessee", "48": "Texas",
    "49": "Utah", "50": "Vermont", "51": "Virginia", "53": "Washington",
    "54": "West Virginia", "55": "Wisconsin", "56": "Wyoming",
    "60": "American Samoa", "66": "Guam", "69": "Northern Mariana Islands",
    "72": "Puerto Rico", "78": "U.S. Virgin Islands",
}
