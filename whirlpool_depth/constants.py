"""
Whirlpool 상수 정의

온체인 수준 정밀도를 위한 상수들:
- Q64: sqrt price 인코딩에 사용 (2^64, Q64.64)
- TICK_ARRAY_SIZE: 하나의 틱 배열 계정이 담는 틱 개수
- MIN_TICK_INDEX / MAX_TICK_INDEX: 프로토콜 틱 범위
"""

# Fixed-point 인코딩 상수
Q64: int = 2 ** 64
Q128: int = 2 ** 128

# 틱 배열 하나에 들어가는 틱 수
TICK_ARRAY_SIZE: int = 88

# 틱 범위 상수
MIN_TICK_INDEX: int = -443636
MAX_TICK_INDEX: int = 443636

# sqrtPriceX64 범위
MIN_SQRT_PRICE: int = 4295048016
MAX_SQRT_PRICE: int = 79226673515401279992447579055

# 정수 타입 최대값
U64_MAX: int = 2 ** 64 - 1
U128_MAX: int = 2 ** 128 - 1
I128_MIN: int = -(2 ** 127)
I128_MAX: int = 2 ** 127 - 1

# 수수료율 단위 (fee_rate: 1/100 bp, protocol_fee_rate: bp)
FEE_RATE_DENOMINATOR: int = 1_000_000
PROTOCOL_FEE_RATE_DENOMINATOR: int = 10_000
