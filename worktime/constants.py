MS_PER_MINUTE = 60_000
MS_PER_HOUR = 3_600_000

DAYS_PER_WEEK = 7
