# Economic parameters of the zoo (fixed, not tuned by the player)

# --- Starting endowment ---
STARTING_CASH = 1488.0
STARTING_FOOD = 100
STARTING_POPULARITY = 50.0
FIRST_DAY = 1
MAX_DAYS = 20  # game horizon

# Starter enclosure (id 1)
STARTER_ENCLOSURE_CAPACITY = 5
STARTER_ENCLOSURE_DAILY_COST = 10

# --- Market ---
MARKET_SIZE = 10
MARKET_REFRESH_FEE = 50.0
PURCHASE_LIMIT_FROM_DAY = 10  # after this day: one purchase per day
PURCHASES_PER_DAY_AFTER_LIMIT = 1
SELL_PRICE_RATIO = 0.5

# --- Purchases ---
FOOD_UNIT_PRICE = 2.0
AD_SPEND_STEP = 200  # every full 200 $ ...
AD_POPULARITY_GAIN = 5  # ... buys +5 popularity

# --- Enclosures ---
ENCLOSURE_MIN_CAPACITY = 1
ENCLOSURE_MAX_CAPACITY = 100
ENCLOSURE_BUILD_COST_PER_SLOT = 50
ENCLOSURE_UPKEEP_PER_SLOT = 2

# --- Staff ---
MIN_ASSIGNMENT_DAYS = 1
MAX_ASSIGNMENT_DAYS = 365

# --- Loans ---
LOAN_DAILY_RATE = 0.005  # 0.5 % per day
LOAN_MAX_DAYS = 20
LOAN_MAX_AMOUNT = 1_000_000

# --- Biology ---
BREEDING_MIN_AGE_DAYS = 5  # parents must be strictly older
OLD_AGE_FROM_DAYS = 30  # past this age, a mortality roll every day
SICKNESS_CHANCE_PCT = 10
STARVATION_DEATH_PCT = 30
FOOD_PER_HERBIVORE = 1
FOOD_PER_CARNIVORE = 2
NEWBORN_SUFFIX = "_Newborn"

# --- Popularity & visitors ---
POPULARITY_SWING_PCT = 10  # uniform swing in [-10, +10] %
CELEBRITY_ROLL_FROM = 20
PHOTOGRAPHER_ROLL_FROM = 30
NO_SPECIAL_ROLL_FROM = 50
CELEBRITY_MAX_COUNT = 2
PHOTOGRAPHER_MAX_COUNT = 3
CELEBRITY_POPULARITY_BONUS = 10
PHOTOGRAPHER_POPULARITY_BONUS = 5
