"""Seed the database with test data."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import date, datetime
from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401

from app.models.user import User
from app.models.category import Category
from app.models.content import News, Video, LongVideo, Magazine, Magazine2


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(User).count() > 0:
            print("Database already seeded. Skipping.")
            return

        # Users
        users = [
            User(email="admin@newsroom.local", display_name="관리자 김철수", role="admin"),
            User(email="moderator@newsroom.local", display_name="모더레이터 이영희", role="moderator"),
            User(email="writer1@newsroom.local", display_name="기자 박민준", role="content"),
            User(email="writer2@newsroom.local", display_name="기자 정수연", role="content"),
            User(email="reader@newsroom.local", display_name="독자 최동현", role="user"),
        ]
        db.add_all(users)
        db.flush()
        admin, moderator, writer1, writer2 = users[0], users[1], users[2], users[3]

        # Categories
        categories = [
            Category(name="정치", description="국정/지방 정치", status="approved", created_by=admin.user_id),
            Category(name="사회", description="사건/사고, 생활", status="approved", created_by=admin.user_id),
            Category(name="문화", description="공연/전시/인물", status="pending", created_by=writer1.user_id),
        ]
        db.add_all(categories)
        db.flush()

        now = datetime.utcnow()
        news = [
            News(title="도의회 본회의 예산안 통과", description="내년도 예산안이 본회의를 통과했다.",
                 category_id=categories[0].category_id, news_type="statenews", tags=["예산", "도의회"],
                 author="박민준", status="approved", created_by=admin.user_id,
                 approved_by=admin.user_id, approved_at=now, last_updated=now),
            News(title="구청 앞 도로 정비 착공", description="다음 달까지 부분 통제가 이어진다.",
                 category_id=categories[1].category_id, news_type="districtnews",
                 author="정수연", status="pending", created_by=writer2.user_id, last_updated=now),
        ]
        videos = [
            Video(title="예산안 표결 현장", description="본회의장 표결 장면", thumbnail="/media/vote.jpg",
                  video_url="https://cdn.newsroom.local/v/vote.mp4", category_id=categories[0].category_id,
                  video_duration=95, status="pending", created_by=writer1.user_id, last_updated=now),
        ]
        long_videos = [
            LongVideo(title="도정 1년 특집 대담", description="도지사 특집 대담 전편", thumbnail="/media/talk.jpg",
                      video_url="https://cdn.newsroom.local/v/talk.mp4", category_id=categories[0].category_id,
                      video_duration=3120, news_type="specialnews", status="approved",
                      created_by=moderator.user_id, approved_by=admin.user_id, approved_at=now, last_updated=now),
        ]
        magazines = [
            Magazine(title="월간 뉴스룸 1월호", description="신년 특집", published_date=date(2026, 1, 5),
                     published_month="January", published_year="2026", edition_number="1",
                     magazine_type="magazine", status="approved", created_by=admin.user_id,
                     approved_by=admin.user_id, approved_at=now, last_updated=now),
            Magazine2(title="주간 지역판 3호", description="지역 소식 모음", published_date=date(2026, 2, 14),
                      published_month="February", published_year="2026", edition_number="3",
                      magazine_type="magazine2", status="pending", created_by=writer1.user_id, last_updated=now),
        ]
        db.add_all(news + videos + long_videos + magazines)

        db.commit()
        print("Seed data inserted successfully.")
        print(f"  Users: {len(users)}")
        print(f"  Categories: {len(categories)}")
        print(f"  News: {len(news)}")
        print(f"  Videos: {len(videos)} / Long videos: {len(long_videos)}")
        print(f"  Magazines: {len(magazines)}")
        print()
        print("Test login credentials:")
        for u in users:
            print(f"  email={u.email}  role={u.role}  name={u.display_name}")

    except Exception as e:
        db.rollback()
        raise e
    finally:
        db.close()


if __name__ == "__main__":
    seed()
