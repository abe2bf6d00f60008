# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


# XDR works on 4-byte units, every variable-length item is aligned to this
XDR_UNIT_SIZE = 4

# largest value that fits in the unsigned-32 length/count prefixes
MAX_U32 = 2**32 - 1

DEFAULT_TEXT_MAX_LENGTH = MAX_U32
DEFAULT_SEQUENCE_MAX_LENGTH = MAX_U32
