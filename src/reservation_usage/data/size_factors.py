# src/reservation_usage/data/size_factors.py

"""
Normalization factors for EC2 instance sizes.
AWS : https://docs.aws.amazon.com/AWSEC2/latest/UserGuide/apply_ri.html#ri-normalization-factor

Sizes larger than xlarge are written "<n>xlarge" and weigh n times an xlarge,
so they are not listed here.
"""

XLARGE_FACTOR = 8

SIZE_FACTORS = {
    "nano": 0.25,
    "micro": 0.5,
    "small": 1,
    "medium": 2,
    "large": 4,
    "xlarge": XLARGE_FACTOR,
}
