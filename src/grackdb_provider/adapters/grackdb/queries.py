"""GraphQL documents sent to GrackDB."""

from __future__ import annotations

from typing import Final

USER_FIELDS: Final = """
    id
    username
    avatarUrl
"""

DISCORD_ACCOUNT_FIELDS: Final = f"""
    id
    discordId
    username
    discriminator
    owner {{{USER_FIELDS}}}
    bot {{
        id
    }}
"""

CURRENT_USER_QUERY: Final = f"""
{{
    currentUser {{{USER_FIELDS}}}
}}
"""

CREATE_USER_MUTATION: Final = f"""
mutation($input: CreateUserInput!) {{
    createUser(input: $input) {{{USER_FIELDS}}}
}}
"""

READ_USER_QUERY: Final = f"""
query($userId: ID!) {{
    users(where: {{ id: $userId }}) {{
        edges {{
            node {{{USER_FIELDS}}}
        }}
    }}
}}
"""

UPDATE_USER_MUTATION: Final = f"""
mutation($userId: ID!, $input: UpdateUserInput!) {{
    updateUser(id: $userId, input: $input) {{{USER_FIELDS}}}
}}
"""

DELETE_USER_MUTATION: Final = f"""
mutation($userId: ID!) {{
    deleteUser(id: $userId) {{{USER_FIELDS}}}
}}
"""

CREATE_DISCORD_ACCOUNT_MUTATION: Final = f"""
mutation($input: CreateDiscordAccountInput!) {{
    createDiscordAccount(input: $input) {{{DISCORD_ACCOUNT_FIELDS}}}
}}
"""

READ_DISCORD_ACCOUNT_QUERY: Final = f"""
query($accountId: ID!) {{
    discordAccounts(where: {{ id: $accountId }}) {{
        edges {{
            node {{{DISCORD_ACCOUNT_FIELDS}}}
        }}
    }}
}}
"""

UPDATE_DISCORD_ACCOUNT_MUTATION: Final = f"""
mutation($accountId: ID!, $input: UpdateDiscordAccountInput!) {{
    updateDiscordAccount(id: $accountId, input: $input) {{{DISCORD_ACCOUNT_FIELDS}}}
}}
"""

DELETE_DISCORD_ACCOUNT_MUTATION: Final = f"""
mutation($accountId: ID!) {{
    deleteDiscordAccount(id: $accountId) {{{DISCORD_ACCOUNT_FIELDS}}}
}}
"""
