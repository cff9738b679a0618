from tortoise import BaseDBAsyncClient


async def upgrade(db: BaseDBAsyncClient) -> str:
    return """
        CREATE TABLE IF NOT EXISTS "users" (
    "id" UUID NOT NULL PRIMARY KEY,
    "username" VARCHAR(50) NOT NULL,
    "first_name" VARCHAR(50),
    "first_name_ruby" VARCHAR(50),
    "last_name" VARCHAR(50),
    "last_name_ruby" VARCHAR(50),
    "role" INT NOT NULL DEFAULT 8,
    "password_hash" VARCHAR(255),
    "created_at" TIMESTAMPTZ NOT NULL,
    "created_by" VARCHAR(64) NOT NULL DEFAULT 'system',
    "updated_at" TIMESTAMPTZ NOT NULL,
    "updated_by" VARCHAR(64) NOT NULL DEFAULT 'system',
    "deleted" BOOL NOT NULL DEFAULT False
);
CREATE INDEX IF NOT EXISTS "idx_users_usernam_266d85" ON "users" ("username");
CREATE INDEX IF NOT EXISTS "idx_users_deleted_b1b1f4" ON "users" ("deleted");
CREATE TABLE IF NOT EXISTS "todos" (
    "id" UUID NOT NULL PRIMARY KEY,
    "title" VARCHAR(32) NOT NULL,
    "descriptions" VARCHAR(128),
    "completed" BOOL NOT NULL DEFAULT False,
    "created_at" TIMESTAMPTZ NOT NULL,
    "created_by" VARCHAR(64) NOT NULL DEFAULT 'system',
    "updated_at" TIMESTAMPTZ NOT NULL,
    "updated_by" VARCHAR(64) NOT NULL DEFAULT 'system',
    "deleted" BOOL NOT NULL DEFAULT False,
    "user_id" UUID NOT NULL REFERENCES "users" ("id") ON DELETE CASCADE
);
CREATE INDEX IF NOT EXISTS "idx_todos_deleted_4a5f0e" ON "todos" ("deleted");
CREATE INDEX IF NOT EXISTS "idx_todos_user_id_8c2d31" ON "todos" ("user_id");
CREATE TABLE IF NOT EXISTS "aerich" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "version" VARCHAR(255) NOT NULL,
    "app" VARCHAR(100) NOT NULL,
    "content" JSONB NOT NULL
);"""


async def downgrade(db: BaseDBAsyncClient) -> str:
    return """
        """
