"""
GraphQL documents for every node operation.
"""

from __future__ import annotations

BLOCK_FRAGMENT = """
fragment blockFragment on Block {
  id
  height
  producer
  transactions {
    id
    rawPayload
  }
  time
}
"""

GET_VERSION = """
query getVersion {
  version
}
"""

GET_TRANSACTION = """
query getTransaction($transactionId: HexString256!) {
  transaction(id: $transactionId) {
    id
    rawPayload
  }
}
"""

GET_TRANSACTIONS = """
query getTransactions($after: String, $before: String, $first: Int, $last: Int) {
  transactions(after: $after, before: $before, first: $first, last: $last) {
    edges {
      node {
        id
        rawPayload
      }
    }
  }
}
"""

GET_BLOCK = """
query getBlock($blockId: HexString256!) {
  block(id: $blockId) {
    ...blockFragment
  }
}
""" + BLOCK_FRAGMENT

GET_BLOCKS = """
query getBlocks($after: String, $before: String, $first: Int, $last: Int) {
  blocks(after: $after, before: $before, first: $first, last: $last) {
    edges {
      node {
        ...blockFragment
      }
    }
  }
}
""" + BLOCK_FRAGMENT

GET_COIN = """
query getCoin($coinId: HexString256!) {
  coin(id: $coinId) {
    id
    owner
    amount
    color
    maturity
    status
    blockCreated
  }
}
"""

DRY_RUN = """
mutation dryRun($encodedTransaction: HexString!) {
  dryRun(tx: $encodedTransaction) {
    rawPayload
  }
}
"""

SUBMIT = """
mutation submit($encodedTransaction: HexString!) {
  submit(tx: $encodedTransaction)
}
"""

START_SESSION = """
mutation startSession {
  startSession
}
"""

EXECUTE = """
mutation execute($sessionId: ID!, $op: String!) {
  execute(id: $sessionId, op: $op)
}
"""

RESET = """
mutation reset($sessionId: ID!) {
  reset(id: $sessionId)
}
"""

END_SESSION = """
mutation endSession($sessionId: ID!) {
  endSession(id: $sessionId)
}
"""
