"""Column names of the readings file, in on-disk order."""

TIMESTAMP = "timestamp"
SYSTOLIC = "systolic"
DIASTOLIC = "diastolic"
PULSE = "pulse"

READING_FIELDS = (TIMESTAMP, SYSTOLIC, DIASTOLIC, PULSE)
MEASUREMENT_FIELDS = (SYSTOLIC, DIASTOLIC, PULSE)
