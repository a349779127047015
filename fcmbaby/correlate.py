# Copyright 2015 OpenMarket Ltd
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


def correlate(results, registration_ids=None):
    """
    FCM returns one result per registration id in the order the ids were
    sent, but the results don't say which id they belong to. This pairs
    them back up.

    Args:
        results (list): The 'results' list from an FCM response
        registration_ids (list): The registration ids in the order they
                                 were sent, or None if unknown.
    Returns:
        A dict of registration id to result. Without registration ids, or
        for any results beyond the last id, the key is the index of the
        result instead.
    """
    if not registration_ids or not results:
        return dict(enumerate(results))

    correlated = {}
    paired = min(len(results), len(registration_ids))
    # Walk by index rather than popping ids until one is falsy: an empty
    # id would otherwise end the walk early and leave every later result
    # keyed by position.
    for i in range(paired):
        correlated[registration_ids[i]] = results[i]
    for i in range(paired, len(results)):
        correlated[i] = results[i]
    return correlated
